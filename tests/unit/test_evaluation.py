"""Tests for evaluation metrics and the in-process runner."""

from citation_grounding.evaluation.metrics import (
    EvalCaseResult,
    build_confusion_matrix,
    compute_category_metrics,
    compute_metrics,
)
from citation_grounding.evaluation.runner import DATASET_PATH, load_dataset, run_evaluation


def _case(case_id, expected, actual, score=100.0, category="grounded", error=None, min_score=None):
    return EvalCaseResult(
        case_id=case_id,
        category=category,
        expected_labels=expected,
        actual_labels=actual,
        grounding_score=score,
        latency_ms=10.0,
        expected_min_score=min_score,
        error=error,
    )


def test_compute_metrics_empty():
    metrics = compute_metrics([])
    assert metrics["total_cases"] == 0
    assert metrics["label_accuracy"] == 0.0


def test_compute_metrics():
    results = [
        _case("a", ["valid"], ["valid"], min_score=90),
        _case("b", ["invalid"], ["invalid"], score=20.0, category="hallucination"),
        _case("c", ["invalid", "valid"], ["valid"], score=60.0, category="hallucination"),
        _case("d", ["valid"], [], error="boom"),
    ]
    metrics = compute_metrics(results)

    assert metrics["total_cases"] == 4
    assert metrics["valid_cases"] == 3
    assert metrics["error_count"] == 1
    # 2 correct out of 4 expected positions
    assert metrics["label_accuracy"] == 0.5
    assert metrics["hallucination_precision"] == 1.0
    assert metrics["hallucination_recall"] == 0.5
    assert metrics["extraction_accuracy"] == 2 / 3
    assert metrics["score_pass_rate"] == 1.0


def test_confusion_matrix_and_categories():
    results = [
        _case("a", ["valid"], ["valid"]),
        _case("b", ["invalid"], ["suspicious"], category="hallucination", score=0.0),
    ]
    matrix = build_confusion_matrix(results)
    assert matrix["valid"]["valid"] == 1
    assert matrix["invalid"]["suspicious"] == 1

    categories = compute_category_metrics(results)
    assert categories["grounded"]["label_accuracy"] == 1.0
    assert categories["hallucination"]["label_accuracy"] == 0.0
    assert categories["hallucination"]["avg_grounding_score"] == 0.0


def test_dataset_fixture_loads():
    dataset = load_dataset()
    assert DATASET_PATH.exists()
    assert {case["id"] for case in dataset} >= {"exact-quote", "fabricated-quote"}


async def test_run_evaluation_on_fixture():
    results = await run_evaluation(concurrency=2)
    metrics = compute_metrics(results)

    assert metrics["error_count"] == 0
    assert metrics["label_accuracy"] == 1.0
    assert metrics["hallucination_recall"] == 1.0
    assert metrics["score_pass_rate"] == 1.0

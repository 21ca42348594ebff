"""Evaluation metric computation for labelled citation-grounding cases."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import groupby

LABELS = ("valid", "suspicious", "invalid")


@dataclass
class EvalCaseResult:
    """Result of running a single evaluation case.

    ``expected_labels`` and ``actual_labels`` are per-citation verdicts in
    extraction order.
    """

    case_id: str
    category: str
    expected_labels: list[str]
    actual_labels: list[str]
    grounding_score: float
    latency_ms: float
    expected_min_score: float | None = None
    error: str | None = None
    reasoning: list[str] = field(default_factory=list)

    @property
    def labels_correct(self) -> int:
        return sum(1 for e, a in zip(self.expected_labels, self.actual_labels) if e == a)

    @property
    def extraction_correct(self) -> bool:
        return len(self.expected_labels) == len(self.actual_labels)

    @property
    def score_ok(self) -> bool:
        return self.expected_min_score is None or self.grounding_score >= self.expected_min_score


def compute_metrics(results: list[EvalCaseResult]) -> dict:
    """Compute all evaluation metrics from raw results.

    Label accuracy is positional; when extraction finds a different number of
    citations than expected, the unmatched positions count as wrong.
    """
    total = len(results)
    if total == 0:
        return _empty_metrics()

    valid = [r for r in results if r.error is None]
    errors = [r for r in results if r.error is not None]

    expected_total = sum(max(len(r.expected_labels), len(r.actual_labels)) for r in valid)
    correct = sum(r.labels_correct for r in valid)
    label_accuracy = correct / expected_total if expected_total else 0.0

    # Hallucination detection: "invalid" is the positive class
    tp = fp = fn = 0
    for r in valid:
        for expected, actual in zip(r.expected_labels, r.actual_labels):
            if actual == "invalid" and expected == "invalid":
                tp += 1
            elif actual == "invalid":
                fp += 1
            elif expected == "invalid":
                fn += 1
    precision = tp / (tp + fp) if tp + fp else 0.0
    recall = tp / (tp + fn) if tp + fn else 0.0

    extraction_accuracy = sum(r.extraction_correct for r in valid) / len(valid) if valid else 0.0
    score_pass_rate = sum(r.score_ok for r in valid) / len(valid) if valid else 0.0
    avg_score = sum(r.grounding_score for r in valid) / len(valid) if valid else 0.0
    avg_latency = sum(r.latency_ms for r in valid) / len(valid) if valid else 0.0

    return {
        "total_cases": total,
        "valid_cases": len(valid),
        "label_accuracy": label_accuracy,
        "extraction_accuracy": extraction_accuracy,
        "hallucination_precision": precision,
        "hallucination_recall": recall,
        "score_pass_rate": score_pass_rate,
        "avg_grounding_score": avg_score,
        "avg_latency_ms": avg_latency,
        "error_count": len(errors),
    }


def build_confusion_matrix(results: list[EvalCaseResult]) -> dict[str, dict[str, int]]:
    """Rows are expected labels, columns are actual labels."""
    matrix: dict[str, dict[str, int]] = {exp: {act: 0 for act in LABELS} for exp in LABELS}
    for r in results:
        if r.error is not None:
            continue
        for exp, act in zip(r.expected_labels, r.actual_labels):
            if exp in LABELS and act in LABELS:
                matrix[exp][act] += 1
    return matrix


def compute_category_metrics(results: list[EvalCaseResult]) -> dict[str, dict]:
    valid = [r for r in results if r.error is None]
    if not valid:
        return {}

    categories: dict[str, dict] = {}
    for cat, group in groupby(sorted(valid, key=lambda r: r.category), key=lambda r: r.category):
        cat_results = list(group)
        n = len(cat_results)
        labels = sum(max(len(r.expected_labels), len(r.actual_labels)) for r in cat_results)
        categories[cat] = {
            "count": n,
            "label_accuracy": sum(r.labels_correct for r in cat_results) / labels if labels else 0.0,
            "avg_grounding_score": sum(r.grounding_score for r in cat_results) / n,
            "avg_latency_ms": sum(r.latency_ms for r in cat_results) / n,
        }
    return categories


def _empty_metrics() -> dict:
    return {
        "total_cases": 0,
        "valid_cases": 0,
        "label_accuracy": 0.0,
        "extraction_accuracy": 0.0,
        "hallucination_precision": 0.0,
        "hallucination_recall": 0.0,
        "score_pass_rate": 0.0,
        "avg_grounding_score": 0.0,
        "avg_latency_ms": 0.0,
        "error_count": 0,
    }

"""Run the labelled evaluation dataset through the grounding engine.

Usage:
    python scripts/run_eval.py [--dataset PATH] [--output PATH] [--concurrency N]
"""

from __future__ import annotations

import argparse
import asyncio
import json
from dataclasses import asdict
from pathlib import Path

from citation_grounding.evaluation.metrics import (
    LABELS,
    EvalCaseResult,
    build_confusion_matrix,
    compute_category_metrics,
    compute_metrics,
)
from citation_grounding.evaluation.runner import (
    DATASET_PATH,
    DEFAULT_CONCURRENCY,
    run_evaluation,
)
from citation_grounding.observability.logger import setup_logging


def print_header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


def print_summary(metrics: dict) -> None:
    print_header("EVALUATION SUMMARY")
    print(f"  Total cases:             {metrics['total_cases']}")
    print(f"  Valid cases:             {metrics['valid_cases']}")
    print(f"  Errors:                  {metrics['error_count']}")
    print(f"  Label accuracy:          {metrics['label_accuracy']:.1%}")
    print(f"  Extraction accuracy:     {metrics['extraction_accuracy']:.1%}")
    print(f"  Hallucination precision: {metrics['hallucination_precision']:.1%}")
    print(f"  Hallucination recall:    {metrics['hallucination_recall']:.1%}")
    print(f"  Score pass rate:         {metrics['score_pass_rate']:.1%}")
    print(f"  Avg grounding score:     {metrics['avg_grounding_score']:.1f}")
    print(f"  Avg latency:             {metrics['avg_latency_ms']:.0f} ms")


def print_category_breakdown(by_category: dict) -> None:
    print_header("PER-CATEGORY BREAKDOWN")
    print(f"  {'Category':<16} {'Count':>5} {'Accuracy':>10} {'Score':>8} {'Latency':>10}")
    print(f"  {'-' * 53}")
    for cat, m in sorted(by_category.items()):
        print(
            f"  {cat:<16} {m['count']:>5} "
            f"{m['label_accuracy']:>9.1%} "
            f"{m['avg_grounding_score']:>8.1f} "
            f"{m['avg_latency_ms']:>8.0f}ms"
        )


def print_confusion_matrix(matrix: dict) -> None:
    print_header("CONFUSION MATRIX (expected \\ actual)")
    print(f"  {'':>12}" + "".join(f"{label:>12}" for label in LABELS))
    print(f"  {'-' * 48}")
    for exp in LABELS:
        print(f"  {exp:>12}" + "".join(f"{matrix[exp][act]:>12}" for act in LABELS))


def print_case_details(results: list[EvalCaseResult]) -> None:
    print_header("INDIVIDUAL CASE RESULTS")
    for r in results:
        if r.error:
            status = "ERROR"
        elif r.extraction_correct and r.labels_correct == len(r.expected_labels) and r.score_ok:
            status = "PASS"
        else:
            status = "FAIL"
        print(
            f"  [{status:>5}] {r.case_id:<20} | "
            f"expected={','.join(r.expected_labels):<28} "
            f"actual={','.join(r.actual_labels):<28} | score={r.grounding_score:.1f}"
        )
        if r.error:
            print(f"         error: {r.error}")


def save_results(results: list[EvalCaseResult], metrics: dict, output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "metrics": metrics,
        "results": [asdict(r) for r in results],
    }
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, default=str)
    print(f"\nRaw results saved to {output_path}")


async def main(dataset: Path, output_path: Path, concurrency: int) -> None:
    print(f"Dataset: {dataset}")

    results = await run_evaluation(dataset_path=dataset, concurrency=concurrency)

    metrics = compute_metrics(results)
    confusion = build_confusion_matrix(results)
    by_category = compute_category_metrics(results)

    metrics["confusion_matrix"] = confusion
    metrics["by_category"] = by_category

    print_summary(metrics)
    print_category_breakdown(by_category)
    print_confusion_matrix(confusion)
    print_case_details(results)

    save_results(results, metrics, output_path)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run the citation grounding evaluation harness")
    parser.add_argument("--dataset", default=str(DATASET_PATH), help="Labelled dataset JSON")
    parser.add_argument(
        "--output",
        default="data/eval_results.json",
        help="Path to save raw results JSON (default: data/eval_results.json)",
    )
    parser.add_argument("--concurrency", type=int, default=DEFAULT_CONCURRENCY)
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()
    setup_logging(args.log_level)
    asyncio.run(main(Path(args.dataset), Path(args.output), args.concurrency))

"""Evaluation runner: loads a labelled dataset and runs it through the engine in-process."""

from __future__ import annotations

import asyncio
import json
import time
from pathlib import Path

from citation_grounding.config.settings import Settings
from citation_grounding.evaluation.metrics import EvalCaseResult
from citation_grounding.exceptions import GroundingEngineError
from citation_grounding.pipeline.validation_pipeline import GroundingPipeline
from citation_grounding.scoring.grounding_score import GroundingScorer

DEFAULT_CONCURRENCY = 4

DATASET_PATH = (
    Path(__file__).parent.parent.parent.parent / "tests" / "fixtures" / "eval_dataset.json"
)


def load_dataset(path: Path | None = None) -> list[dict]:
    """Load evaluation dataset from JSON file."""
    p = path or DATASET_PATH
    with open(p, encoding="utf-8") as f:
        return json.load(f)


async def run_single_case(
    pipeline: GroundingPipeline,
    scorer: GroundingScorer,
    case: dict,
    semaphore: asyncio.Semaphore,
) -> EvalCaseResult:
    async with semaphore:
        expected = case.get("expected_labels", [])
        start = time.monotonic()
        try:
            report = await pipeline.avalidate(case["generated_text"], case.get("corpus", []))
        except GroundingEngineError as e:
            return EvalCaseResult(
                case_id=case["id"],
                category=case.get("category", "default"),
                expected_labels=expected,
                actual_labels=[],
                grounding_score=0.0,
                latency_ms=0.0,
                expected_min_score=case.get("expected_min_score"),
                error=str(e),
            )

        return EvalCaseResult(
            case_id=case["id"],
            category=case.get("category", "default"),
            expected_labels=expected,
            actual_labels=[scorer.classify(r) for r in report.results],
            grounding_score=report.grounding_score,
            latency_ms=(time.monotonic() - start) * 1000,
            expected_min_score=case.get("expected_min_score"),
            reasoning=[r.reasoning for r in report.results],
        )


async def run_evaluation(
    dataset_path: Path | None = None,
    settings: Settings | None = None,
    concurrency: int = DEFAULT_CONCURRENCY,
) -> list[EvalCaseResult]:
    """Run every case of the dataset and return the raw per-case results."""
    dataset = load_dataset(dataset_path)
    settings = settings or Settings()
    pipeline = GroundingPipeline(settings)
    scorer = GroundingScorer(settings)
    semaphore = asyncio.Semaphore(concurrency)

    tasks = [run_single_case(pipeline, scorer, case, semaphore) for case in dataset]
    return list(await asyncio.gather(*tasks))

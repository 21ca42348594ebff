"""Markdown rendering of an AggregateReport."""

from __future__ import annotations

from citation_grounding.config.settings import Settings
from citation_grounding.models.domain import AggregateReport, ValidationResult
from citation_grounding.reporting.summary import grade, recommendation
from citation_grounding.scoring.grounding_score import VALID, GroundingScorer

_LEVEL_NAMES = {
    1: "Exact quote",
    2: "Author-year",
    3: "Filename",
    4: "Topical",
    5: "Plausibility",
}


def render_markdown(report: AggregateReport, settings: Settings | None = None) -> str:
    scorer = GroundingScorer(settings or Settings())
    lines = [
        "# Citation Grounding Report",
        "",
        f"**Grounding score:** {report.grounding_score:.1f}/100 "
        f"(grade {grade(report.validation_rate)})",
        "",
        report.summary,
        "",
        "## Summary",
        "",
        "| Metric | Value |",
        "|---|---|",
        f"| Total citations | {report.total} |",
        f"| Verified | {report.valid_count} |",
        f"| Suspicious | {report.suspicious_count} |",
        f"| Unsupported | {report.invalid_count} |",
        f"| Validation rate | {report.validation_rate:.1%} |",
        "",
        "## Accepted by level",
        "",
    ]
    for level, count in sorted(report.level_breakdown.items()):
        lines.append(f"- Level {level} ({_LEVEL_NAMES.get(level, '?')}): {count}")

    valid = [r for r in report.results if scorer.classify(r) == VALID]
    lines += ["", f"## Verified citations ({len(valid)})", ""]
    lines += [_result_entry(r) for r in valid] or ["None"]

    lines += ["", f"## Warnings ({len(report.warnings)})", ""]
    lines += [f"- {w}" for w in report.warnings] or ["None"]

    lines += ["", f"## Unsupported citations ({len(report.hallucinations)})", ""]
    lines += [_result_entry(r) for r in report.hallucinations] or ["None"]

    if report.fix_suggestions:
        lines += ["", "## Suggested fixes", ""]
        for fix in report.fix_suggestions:
            lines += [
                f"- **Original:** {fix.original}",
                f"  - **Suggested:** {fix.suggested}",
                f"  - {fix.reason}",
            ]

    if report.fact_claims:
        lines += ["", "## Factual claims", ""]
        for claim in report.fact_claims:
            status = "verified" if claim.is_verified else "unverified"
            source = f" in '{claim.source}'" if claim.source and claim.is_verified else ""
            lines.append(f"- [{status}{source}] ({claim.claim_type}) {claim.text}")

    lines += [
        "",
        "## Recommendation",
        "",
        recommendation(report.validation_rate, report.invalid_count),
        "",
    ]
    return "\n".join(lines)


def _result_entry(result: ValidationResult) -> str:
    found_in = result.matched_document or "n/a"
    return (
        f"- **{result.citation.full_text}**\n"
        f"  - Level {result.level} | {result.match_type.value} | "
        f"confidence {result.confidence:.0%} | source: {found_in}\n"
        f"  - {result.reasoning}"
    )

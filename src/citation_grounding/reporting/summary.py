"""Human-readable verdicts derived from the aggregate counts."""

from __future__ import annotations

_GRADES: tuple[tuple[float, str], ...] = (
    (0.9, "A+"),
    (0.8, "A"),
    (0.7, "B"),
    (0.5, "C"),
    (0.3, "D"),
)


def grade(validation_rate: float) -> str:
    for threshold, letter in _GRADES:
        if validation_rate >= threshold:
            return letter
    return "F"


def summarize(total: int, valid: int, suspicious: int, invalid: int, validation_rate: float) -> str:
    if total == 0:
        return "No citations found in the text."
    if validation_rate >= 0.95 and invalid == 0:
        verdict = "Excellent grounding"
    elif validation_rate >= 0.85:
        verdict = "Very good grounding"
    elif validation_rate >= 0.70:
        verdict = "Good grounding, some citations need review"
    elif validation_rate >= 0.50:
        verdict = "Weak grounding, revise the flagged citations"
    else:
        verdict = "Critical: most citations are not supported by the sources"
    return (
        f"{verdict}: {valid}/{total} citations verified, "
        f"{suspicious} suspicious, {invalid} unsupported (grade {grade(validation_rate)})."
    )


def recommendation(validation_rate: float, invalid: int) -> str:
    if validation_rate >= 0.9 and invalid == 0:
        return "Ready for publication."
    if validation_rate >= 0.7:
        return "Minor revisions: review the suspicious citations."
    return "Major revision required: replace or remove the unsupported citations."

"""Compliance score calculation.

The score starts at 100 and loses points per open violation:
  - critical -> 20 points
  - warning  -> 5 points
  - info     -> 1 point
Total deductions are capped at 100, so the score never goes negative.
Which rule produced a violation does not matter, only its severity.
"""

from typing import List, Optional

from theranote.models import (
    ComplianceConfig,
    ComplianceSummary,
    ComplianceViolation,
    Severity,
)


def score_rating(score: int) -> str:
    """Dashboard label for a compliance score."""
    if score >= 90:
        return "Excellent"
    if score >= 70:
        return "Good"
    if score >= 50:
        return "Needs Attention"
    return "Critical"


def summarize(
    violations: List[ComplianceViolation],
    config: Optional[ComplianceConfig] = None,
) -> ComplianceSummary:
    """Count violations per severity and compute the weighted score.

    Args:
        violations: Any list of violations, sorted or not.
        config: Weights and deduction cap. Defaults to ComplianceConfig().

    Returns:
        ComplianceSummary with the raw counts, total, score and rating.
    """
    config = config or ComplianceConfig()

    critical = sum(1 for v in violations if v.severity == Severity.CRITICAL)
    warning = sum(1 for v in violations if v.severity == Severity.WARNING)
    info = sum(1 for v in violations if v.severity == Severity.INFO)

    deductions = min(
        config.max_deductions,
        critical * config.critical_weight
        + warning * config.warning_weight
        + info * config.info_weight,
    )
    score = max(0, 100 - deductions)

    return ComplianceSummary(
        critical=critical,
        warning=warning,
        info=info,
        total=len(violations),
        compliance_score=score,
        rating=score_rating(score),
    )

"""IEP service frequency rule.

Compares sessions delivered this month against the number the mandate
requires. Below 80% delivery is a warning; below 60% is critical. A
caseload with nothing mandated for the month counts as 100% compliant.
"""

import math
from typing import List

from theranote.models import CaseloadSummary, ComplianceViolation, Severity

RULE_LABEL = "IEP service frequency"


def compliance_rate(caseload: CaseloadSummary) -> float:
    """Percentage of mandated monthly sessions delivered."""
    if caseload.expected_sessions_month <= 0:
        return 100.0
    # Multiply first so whole-number rates (3 of 5 -> 60.0) compare exactly
    return caseload.sessions_this_month * 100 / caseload.expected_sessions_month


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def check_frequency(
    caseloads: List[CaseloadSummary],
    warning_rate: float = 80,
    critical_rate: float = 60,
) -> List[ComplianceViolation]:
    """Flag students whose monthly delivery is under the mandated rate."""
    violations: List[ComplianceViolation] = []

    for caseload in caseloads:
        rate = compliance_rate(caseload)
        if rate >= warning_rate:
            continue

        severity = Severity.CRITICAL if rate < critical_rate else Severity.WARNING
        violations.append(ComplianceViolation(
            id=f"frequency-{caseload.student_id}",
            severity=severity,
            rule=RULE_LABEL,
            message=(
                f"{caseload.student_name} has received {caseload.sessions_this_month} "
                f"of {caseload.expected_sessions_month} required sessions this month "
                f"({_round_half_up(rate)}%)"
            ),
            student_id=caseload.student_id,
            student_name=caseload.student_name,
        ))

    return violations

"""Core compliance orchestrator.

Runs the 4 documentation compliance rules against one snapshot:
  1. Signing deadline (critical when overdue, warning when due soon)
  2. SOAP completeness (warning)
  3. Goal progress documentation (info)
  4. IEP service frequency (critical/warning)

Results are concatenated and sorted by severity (critical first), then
by days overdue (most overdue first). The engine holds no state besides
its config, and every rule receives the same ``as_of`` date, so the same
snapshot always produces the same report.
"""

from datetime import date
from typing import Callable, Dict, Iterable, List, Optional

import structlog

from theranote.errors import UnknownRuleError
from theranote.models import (
    ComplianceConfig,
    ComplianceReport,
    ComplianceSnapshot,
    ComplianceViolation,
)
from theranote.compliance.rules.frequency import check_frequency
from theranote.compliance.rules.goal_progress import check_goal_progress
from theranote.compliance.rules.signing import check_signing_deadline
from theranote.compliance.rules.soap import check_soap_completeness
from theranote.compliance.scorer import summarize

logger = structlog.get_logger(__name__)

RuleFn = Callable[[ComplianceSnapshot, date, ComplianceConfig], List[ComplianceViolation]]


# Rule id -> adapter that pulls the rule's inputs from the snapshot.
# Insertion order is the evaluation order.
RULES: Dict[str, RuleFn] = {
    "signing": lambda snap, as_of, cfg: check_signing_deadline(
        sessions=snap.sessions,
        as_of=as_of,
        deadline_days=cfg.signing_deadline_days,
        warning_days=cfg.signing_warning_days,
    ),
    "soap": lambda snap, as_of, cfg: check_soap_completeness(snap.sessions),
    "goal_progress": lambda snap, as_of, cfg: check_goal_progress(
        sessions=snap.sessions,
        session_goals=snap.session_goals,
        goals=snap.goals,
    ),
    "frequency": lambda snap, as_of, cfg: check_frequency(
        caseloads=snap.caseloads,
        warning_rate=cfg.frequency_warning_rate,
        critical_rate=cfg.frequency_critical_rate,
    ),
}


def _sort_key(violation: ComplianceViolation):
    # Within a tier, overdue violations lead, most overdue first; the
    # rest keep insertion order (sorted() is stable).
    has_overdue = violation.days_overdue is not None
    return (
        violation.severity.rank,
        0 if has_overdue else 1,
        -(violation.days_overdue or 0),
    )


def sort_violations(violations: Iterable[ComplianceViolation]) -> List[ComplianceViolation]:
    """Order violations critical -> warning -> info, most overdue first."""
    return sorted(violations, key=_sort_key)


class ComplianceEngine:
    """Evaluates compliance rules over caller-supplied record snapshots."""

    def __init__(self, config: Optional[ComplianceConfig] = None) -> None:
        self.config = config or ComplianceConfig()

    def evaluate(
        self,
        snapshot: ComplianceSnapshot,
        as_of: date,
        rule_ids: Optional[Iterable[str]] = None,
    ) -> List[ComplianceViolation]:
        """Run the selected rules (all by default) and return sorted violations.

        No deduplication: a session can appear once per rule it breaks.

        Raises:
            UnknownRuleError: rule_ids names a rule that does not exist.
        """
        selected = list(RULES) if rule_ids is None else list(rule_ids)
        unknown = set(selected) - set(RULES)
        if unknown:
            raise UnknownRuleError(unknown)

        violations: List[ComplianceViolation] = []
        for rule_id, rule in RULES.items():
            if rule_id not in selected:
                continue
            found = rule(snapshot, as_of, self.config)
            logger.debug("compliance_rule_checked", rule=rule_id, violations=len(found))
            violations.extend(found)

        return sort_violations(violations)

    def report(
        self,
        snapshot: ComplianceSnapshot,
        as_of: date,
        rule_ids: Optional[Iterable[str]] = None,
    ) -> ComplianceReport:
        """Evaluate the snapshot and summarize the result."""
        violations = self.evaluate(snapshot, as_of, rule_ids=rule_ids)
        summary = summarize(violations, self.config)

        logger.info(
            "compliance_evaluated",
            as_of=as_of.isoformat(),
            sessions=len(snapshot.sessions),
            caseloads=len(snapshot.caseloads),
            critical=summary.critical,
            warning=summary.warning,
            info=summary.info,
            compliance_score=summary.compliance_score,
        )

        return ComplianceReport(as_of=as_of, violations=violations, summary=summary)

"""Signing deadline rule.

NYC DOE requires session notes to be signed within 7 calendar days of
the session. Drafts past that deadline are critical; drafts due within
the warning window (today, 1 or 2 days out) get a warning so the
therapist can sign before they go overdue.

All arithmetic is on calendar dates. ``as_of`` is passed in by the
caller; rules never read the clock.
"""

from datetime import date, timedelta
from typing import List

from theranote.models import ComplianceViolation, Session, SessionStatus, Severity

RULE_LABEL = "7-day signing requirement"


def _due_phrase(days_until_deadline: int) -> str:
    if days_until_deadline == 0:
        return "today"
    if days_until_deadline == 1:
        return "in 1 day"
    return f"in {days_until_deadline} days"


def check_signing_deadline(
    sessions: List[Session],
    as_of: date,
    deadline_days: int = 7,
    warning_days: int = 2,
) -> List[ComplianceViolation]:
    """Flag draft sessions that are overdue or close to the signing deadline."""
    violations: List[ComplianceViolation] = []

    for session in sessions:
        if session.status != SessionStatus.DRAFT:
            continue

        deadline = session.session_date + timedelta(days=deadline_days)
        days_until_deadline = (deadline - as_of).days
        name = session.display_name

        if days_until_deadline < 0:
            days_overdue = abs(days_until_deadline)
            violations.append(ComplianceViolation(
                id=f"sign-overdue-{session.id}",
                severity=Severity.CRITICAL,
                rule=RULE_LABEL,
                message=(
                    f"Session note for {name} ({session.session_date.isoformat()}) "
                    f"is {days_overdue} days overdue for signature"
                ),
                session_id=session.id,
                student_id=session.student_id,
                student_name=name,
                due_date=deadline,
                days_overdue=days_overdue,
            ))
        elif days_until_deadline <= warning_days:
            violations.append(ComplianceViolation(
                id=f"sign-soon-{session.id}",
                severity=Severity.WARNING,
                rule=RULE_LABEL,
                message=(
                    f"Session note for {name} ({session.session_date.isoformat()}) "
                    f"needs signature {_due_phrase(days_until_deadline)}"
                ),
                session_id=session.id,
                student_id=session.student_id,
                student_name=name,
                due_date=deadline,
            ))

    return violations

"""SOAP completeness rule.

Draft notes for sessions the student attended should have all four
SOAP sections filled in. This is an informational warning only; the
hard gate is the pre-signing validator, which additionally rejects
whitespace-only sections. Here a section only counts as missing when
it is empty or null.
"""

from typing import List

from theranote.models import ComplianceViolation, Session, SessionStatus, Severity

RULE_LABEL = "Complete SOAP documentation"

SOAP_SECTIONS = (
    ("Subjective", "subjective"),
    ("Objective", "objective"),
    ("Assessment", "assessment"),
    ("Plan", "plan"),
)


def check_soap_completeness(sessions: List[Session]) -> List[ComplianceViolation]:
    """Emit one warning per present draft session with empty SOAP sections."""
    violations: List[ComplianceViolation] = []

    for session in sessions:
        if session.status != SessionStatus.DRAFT:
            continue
        # Absent/cancelled sessions have nothing to document
        if not session.is_present:
            continue

        missing = [label for label, field in SOAP_SECTIONS if not getattr(session, field)]
        if not missing:
            continue

        name = session.display_name
        violations.append(ComplianceViolation(
            id=f"soap-incomplete-{session.id}",
            severity=Severity.WARNING,
            rule=RULE_LABEL,
            message=(
                f"Session for {name} ({session.session_date.isoformat()}) "
                f"is missing: {', '.join(missing)}"
            ),
            session_id=session.id,
            student_id=session.student_id,
            student_name=name,
        ))

    return violations

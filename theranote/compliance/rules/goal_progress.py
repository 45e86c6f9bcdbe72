"""Goal progress documentation rule.

Signed notes for attended sessions should record progress against at
least one of the student's active IEP/IFSP goals (baseline or
in progress). Students with no active goals are never flagged.
"""

from collections import defaultdict
from typing import Dict, List, Set

from theranote.models import (
    ComplianceViolation,
    Goal,
    Session,
    SessionGoal,
    SessionStatus,
    Severity,
)

RULE_LABEL = "Goal progress tracking"


def check_goal_progress(
    sessions: List[Session],
    session_goals: List[SessionGoal],
    goals: List[Goal],
) -> List[ComplianceViolation]:
    """Emit an info violation for signed sessions with no goal data points."""
    students_with_active_goals: Set[str] = {
        g.student_id for g in goals if g.status.is_active
    }

    # Data points per session; a null progress_value is not a data point
    documented: Dict[str, int] = defaultdict(int)
    for sg in session_goals:
        if sg.progress_value is not None:
            documented[sg.session_id] += 1

    violations: List[ComplianceViolation] = []

    for session in sessions:
        if session.status != SessionStatus.SIGNED:
            continue
        if not session.is_present:
            continue
        if session.student_id not in students_with_active_goals:
            continue
        if documented[session.id] > 0:
            continue

        name = session.display_name
        violations.append(ComplianceViolation(
            id=f"goal-progress-{session.id}",
            severity=Severity.INFO,
            rule=RULE_LABEL,
            message=(
                f"Session for {name} ({session.session_date.isoformat()}) "
                f"has no goal progress data recorded"
            ),
            session_id=session.id,
            student_id=session.student_id,
            student_name=name,
        ))

    return violations

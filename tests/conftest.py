"""Shared fixtures for the test suite."""

import pytest
from datetime import date, timedelta
from fastapi.testclient import TestClient

from theranote.main import app
from theranote.models import (
    CaseloadSummary,
    ComplianceConfig,
    ComplianceViolation,
    Goal,
    Session,
    SessionGoal,
)
from theranote.compliance.engine import ComplianceEngine


AS_OF = date(2026, 2, 22)


@pytest.fixture
def as_of():
    return AS_OF


@pytest.fixture
def config():
    return ComplianceConfig()


@pytest.fixture
def engine(config):
    return ComplianceEngine(config=config)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def days_ago(n: int) -> date:
    return AS_OF - timedelta(days=n)


def make_session(
    session_id="s-1",
    session_date=None,
    status="draft",
    attendance="present",
    student_id="stu-1",
    student_name="Maya Lopez",
    subjective="Reports good week at school",
    objective="Produced /r/ in 8/10 trials",
    assessment="Steady progress toward goal",
    plan="Continue /r/ drills in sentences",
    signed_at=None,
) -> Session:
    return Session(
        id=session_id,
        session_date=session_date or AS_OF,
        status=status,
        signed_at=signed_at,
        student_id=student_id,
        subjective=subjective,
        objective=objective,
        assessment=assessment,
        plan=plan,
        attendance_status=attendance,
        student_name=student_name,
    )


def make_goal(goal_id="g-1", student_id="stu-1", status="in_progress") -> Goal:
    return Goal(
        id=goal_id,
        student_id=student_id,
        status=status,
        description="Produce /r/ in all word positions with 80% accuracy",
    )


def make_session_goal(session_id="s-1", goal_id="g-1", progress_value=None) -> SessionGoal:
    return SessionGoal(session_id=session_id, goal_id=goal_id, progress_value=progress_value)


def make_caseload(
    student_id="stu-1",
    student_name="Maya Lopez",
    sessions_this_month=8,
    expected_sessions_month=8,
    weekly_frequency=2,
    sessions_this_week=2,
) -> CaseloadSummary:
    return CaseloadSummary(
        student_id=student_id,
        student_name=student_name,
        weekly_frequency=weekly_frequency,
        sessions_this_week=sessions_this_week,
        sessions_this_month=sessions_this_month,
        expected_sessions_month=expected_sessions_month,
    )


def make_violation(violation_id="v-1", severity="warning", days_overdue=None) -> ComplianceViolation:
    return ComplianceViolation(
        id=violation_id,
        severity=severity,
        rule="Test rule",
        message="Test violation",
        days_overdue=days_overdue,
    )

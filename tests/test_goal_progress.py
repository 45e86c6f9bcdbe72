"""Tests for the goal progress documentation rule."""

from theranote.compliance.rules.goal_progress import check_goal_progress
from theranote.models import Severity
from tests.conftest import make_goal, make_session, make_session_goal


def _signed(**kwargs):
    return make_session(status="signed", **kwargs)


class TestCheckGoalProgress:
    def test_no_active_goals_never_flagged(self):
        result = check_goal_progress([_signed()], [], [])
        assert result == []

    def test_only_met_goals_not_flagged(self):
        goals = [make_goal(status="met"), make_goal(goal_id="g-2", status="discontinued")]
        assert check_goal_progress([_signed()], [], goals) == []

    def test_null_progress_value_flagged(self):
        result = check_goal_progress(
            [_signed()],
            [make_session_goal(progress_value=None)],
            [make_goal()],
        )
        assert len(result) == 1
        v = result[0]
        assert v.severity == Severity.INFO
        assert v.id == "goal-progress-s-1"
        assert v.message == (
            "Session for Maya Lopez (2026-02-22) has no goal progress data recorded"
        )

    def test_recorded_progress_not_flagged(self):
        result = check_goal_progress(
            [_signed()],
            [make_session_goal(progress_value=42)],
            [make_goal()],
        )
        assert result == []

    def test_zero_progress_is_a_data_point(self):
        result = check_goal_progress(
            [_signed()],
            [make_session_goal(progress_value=0)],
            [make_goal()],
        )
        assert result == []

    def test_no_links_with_baseline_goal_flagged(self):
        result = check_goal_progress([_signed()], [], [make_goal(status="baseline")])
        assert len(result) == 1

    def test_progress_for_other_session_ignored(self):
        result = check_goal_progress(
            [_signed(session_id="s-1")],
            [make_session_goal(session_id="s-2", progress_value=80)],
            [make_goal()],
        )
        assert len(result) == 1

    def test_other_students_goals_ignored(self):
        result = check_goal_progress([_signed()], [], [make_goal(student_id="stu-2")])
        assert result == []

    def test_draft_sessions_skipped(self):
        result = check_goal_progress([make_session(status="draft")], [], [make_goal()])
        assert result == []

    def test_absent_sessions_skipped(self):
        result = check_goal_progress([_signed(attendance="absent")], [], [make_goal()])
        assert result == []

"""Tests for the SOAP completeness rule."""

from theranote.compliance.rules.soap import check_soap_completeness
from theranote.models import Severity
from tests.conftest import make_session


class TestCheckSoapCompleteness:
    def test_complete_note_not_flagged(self):
        assert check_soap_completeness([make_session()]) == []

    def test_empty_subjective_only(self):
        result = check_soap_completeness([make_session(subjective="")])
        assert len(result) == 1
        assert result[0].severity == Severity.WARNING
        assert result[0].message.endswith("is missing: Subjective")
        assert result[0].id == "soap-incomplete-s-1"

    def test_missing_sections_in_fixed_order(self):
        session = make_session(plan=None, objective=None, subjective="x", assessment="")
        result = check_soap_completeness([session])
        assert result[0].message.endswith("is missing: Objective, Assessment, Plan")

    def test_all_missing(self):
        session = make_session(subjective=None, objective=None, assessment=None, plan=None)
        result = check_soap_completeness([session])
        assert result[0].message == (
            "Session for Maya Lopez (2026-02-22) is missing: "
            "Subjective, Objective, Assessment, Plan"
        )

    def test_whitespace_counts_as_present(self):
        """Only the pre-signing validator rejects blank text."""
        session = make_session(subjective="   ")
        assert check_soap_completeness([session]) == []

    def test_absent_session_exempt(self):
        session = make_session(
            attendance="absent", subjective=None, objective=None, assessment=None, plan=None,
        )
        assert check_soap_completeness([session]) == []

    def test_cancelled_session_exempt(self):
        session = make_session(attendance="cancelled", plan=None)
        assert check_soap_completeness([session]) == []

    def test_signed_session_not_checked(self):
        session = make_session(status="signed", subjective=None)
        assert check_soap_completeness([session]) == []

    def test_one_violation_per_session(self):
        sessions = [
            make_session(session_id="a", plan=None),
            make_session(session_id="b"),
            make_session(session_id="c", subjective=None, objective=None),
        ]
        result = check_soap_completeness(sessions)
        assert [v.session_id for v in result] == ["a", "c"]

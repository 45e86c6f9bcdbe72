"""Exceptions raised by the compliance engine."""

from typing import Iterable, List


class ComplianceError(Exception):
    """Base class for compliance engine errors."""


class UnknownRuleError(ComplianceError):
    """A requested rule id is not registered with the engine."""

    def __init__(self, rule_ids: Iterable[str]) -> None:
        self.rule_ids: List[str] = sorted(rule_ids)
        super().__init__(f"Unknown compliance rule(s): {', '.join(self.rule_ids)}")


class SessionAlreadySignedError(ComplianceError):
    """Only draft sessions can be signed."""

    def __init__(self, session_id: str, status: str) -> None:
        self.session_id = session_id
        self.status = status
        super().__init__(f"Session {session_id} is '{status}', not a draft")


class SignValidationError(ComplianceError):
    """The session failed pre-signing validation."""

    def __init__(self, session_id: str, errors: List[str]) -> None:
        self.session_id = session_id
        self.errors = errors
        super().__init__(f"Session {session_id} cannot be signed: {'; '.join(errors)}")

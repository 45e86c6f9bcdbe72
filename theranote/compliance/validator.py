"""Pre-signing validation and the draft -> signed transition.

``validate_before_sign`` is the gate that must pass before a note is
signed. It is stricter than the batch SOAP completeness warning: a
section containing only whitespace counts as missing here.
"""

from datetime import datetime, timezone
from typing import List, Optional

import structlog

from theranote.compliance.rules.soap import SOAP_SECTIONS
from theranote.errors import SessionAlreadySignedError, SignValidationError
from theranote.models import Session, SessionStatus, SignValidation

logger = structlog.get_logger(__name__)


def validate_before_sign(session: Session) -> SignValidation:
    """Check whether a session is ready to be signed.

    Attended sessions need all four SOAP sections with non-blank text.
    Sessions the student did not attend need no clinical content.
    """
    errors: List[str] = []

    if session.is_present:
        for label, field in SOAP_SECTIONS:
            value = getattr(session, field)
            if not value or not value.strip():
                errors.append(f"{label} section is required")

    return SignValidation(valid=not errors, errors=errors)


def sign_session(session: Session, signed_at: Optional[datetime] = None) -> Session:
    """Return a signed copy of a draft session.

    Raises:
        SessionAlreadySignedError: the session is not a draft.
        SignValidationError: validate_before_sign() failed.
    """
    if session.status != SessionStatus.DRAFT:
        raise SessionAlreadySignedError(session.id, session.status.value)

    result = validate_before_sign(session)
    if not result.valid:
        logger.info("sign_blocked", session_id=session.id, errors=result.errors)
        raise SignValidationError(session.id, result.errors)

    signed_at = signed_at or datetime.now(timezone.utc)
    logger.info("session_signed", session_id=session.id, signed_at=signed_at.isoformat())
    return session.model_copy(update={"status": SessionStatus.SIGNED, "signed_at": signed_at})

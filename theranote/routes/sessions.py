"""Pre-signing validation endpoints for session notes."""

from fastapi import APIRouter

from theranote.compliance.validator import sign_session, validate_before_sign
from theranote.models import Session, SignRequest, SignValidation

router = APIRouter(prefix="/api/sessions")


@router.post("/validate", response_model=SignValidation)
async def validate(session: Session) -> SignValidation:
    """Report which SOAP sections must be completed before signing."""
    return validate_before_sign(session)


@router.post("/sign", response_model=Session)
async def sign(body: SignRequest) -> Session:
    """Validate a draft session and return it as signed.

    Responds 422 with the list of missing sections when validation
    fails, or 409 when the session is not a draft. The caller persists
    the returned record.
    """
    return sign_session(body.session, signed_at=body.signed_at)

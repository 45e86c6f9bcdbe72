"""Compliance evaluation endpoints."""

from datetime import date
from typing import List

from fastapi import APIRouter, Request

from theranote.compliance.engine import ComplianceEngine
from theranote.compliance.scorer import summarize
from theranote.models import (
    ComplianceReport,
    ComplianceSnapshot,
    ComplianceSummary,
    ComplianceViolation,
)

router = APIRouter(prefix="/api/compliance")


def _get_engine(request: Request) -> ComplianceEngine:
    """Retrieve the compliance engine from application state."""
    return request.app.state.engine


@router.post("/evaluate", response_model=ComplianceReport)
async def evaluate(snapshot: ComplianceSnapshot, request: Request) -> ComplianceReport:
    """Run the compliance rules over a record snapshot.

    ``as_of`` defaults to today's date when the caller omits it. Pass
    ``rules`` to run a subset (e.g. ["signing", "soap"] for drafts only).
    """
    engine = _get_engine(request)
    as_of = snapshot.as_of or date.today()
    return engine.report(snapshot, as_of, rule_ids=snapshot.rules)


@router.post("/summary", response_model=ComplianceSummary)
async def summary(
    violations: List[ComplianceViolation],
    request: Request,
) -> ComplianceSummary:
    """Score an already-computed list of violations."""
    return summarize(violations, request.app.state.config)

"""Pydantic models for the compliance engine and its API."""

from datetime import date, datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


UNKNOWN_STUDENT = "Unknown Student"


class _FallbackEnum(str, Enum):
    """String enum that maps unrecognized values to its OTHER member."""

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            return cls["OTHER"]
        return None


class SessionStatus(_FallbackEnum):
    DRAFT = "draft"
    SIGNED = "signed"
    OTHER = "other"


class AttendanceStatus(_FallbackEnum):
    PRESENT = "present"
    ABSENT = "absent"
    CANCELLED = "cancelled"
    MAKEUP = "makeup"
    OTHER = "other"


class GoalStatus(_FallbackEnum):
    BASELINE = "baseline"
    IN_PROGRESS = "in_progress"
    MET = "met"
    DISCONTINUED = "discontinued"
    OTHER = "other"

    @property
    def is_active(self) -> bool:
        return self in (GoalStatus.BASELINE, GoalStatus.IN_PROGRESS)


class Severity(str, Enum):
    """Violation severity tier.

    Total order: CRITICAL < WARNING < INFO. Lower rank sorts first.
    """

    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    Severity.CRITICAL: 0,
    Severity.WARNING: 1,
    Severity.INFO: 2,
}


class Session(BaseModel):
    """A single therapy session note (SOAP format)."""
    id: str
    session_date: date
    status: SessionStatus
    signed_at: Optional[datetime] = None
    student_id: str
    subjective: Optional[str] = None
    objective: Optional[str] = None
    assessment: Optional[str] = None
    plan: Optional[str] = None
    attendance_status: AttendanceStatus
    student_name: Optional[str] = None  # denormalized from the students table

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value):
        return SessionStatus(value)

    @field_validator("attendance_status", mode="before")
    @classmethod
    def _coerce_attendance(cls, value):
        return AttendanceStatus(value)

    @property
    def display_name(self) -> str:
        return self.student_name or UNKNOWN_STUDENT

    @property
    def is_present(self) -> bool:
        return self.attendance_status == AttendanceStatus.PRESENT


class Goal(BaseModel):
    """An IEP/IFSP goal tracked for one student."""
    id: str
    student_id: str
    status: GoalStatus
    description: str = ""

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value):
        return GoalStatus(value)


class SessionGoal(BaseModel):
    """Progress recorded against a goal during one session."""
    session_id: str
    goal_id: str
    progress_value: Optional[float] = None  # None = no data point, not zero


class CaseloadSummary(BaseModel):
    """Per-student service delivery totals, aggregated by the caller."""
    student_id: str
    student_name: str
    weekly_frequency: float
    sessions_this_week: int
    sessions_this_month: int
    expected_sessions_month: int


class ComplianceViolation(BaseModel):
    """Output of a compliance rule check."""
    id: str  # "<rule prefix>-<record id>", stable across runs
    severity: Severity
    rule: str
    message: str
    session_id: Optional[str] = None
    student_id: Optional[str] = None
    student_name: Optional[str] = None
    due_date: Optional[date] = None
    days_overdue: Optional[int] = None


class ComplianceSummary(BaseModel):
    """Severity counts and the weighted 0-100 compliance score."""
    critical: int
    warning: int
    info: int
    total: int
    compliance_score: int
    rating: str


class SignValidation(BaseModel):
    """Result of the pre-signing check for a single session."""
    valid: bool
    errors: List[str]


class ComplianceSnapshot(BaseModel):
    """Records fetched by the caller for one evaluation."""
    sessions: List[Session] = Field(default_factory=list)
    session_goals: List[SessionGoal] = Field(default_factory=list)
    goals: List[Goal] = Field(default_factory=list)
    caseloads: List[CaseloadSummary] = Field(default_factory=list)
    as_of: Optional[date] = None
    rules: Optional[List[str]] = None


class ComplianceReport(BaseModel):
    """Sorted violations plus their summary."""
    as_of: date
    violations: List[ComplianceViolation]
    summary: ComplianceSummary


class SignRequest(BaseModel):
    """A draft session to transition to signed."""
    session: Session
    signed_at: Optional[datetime] = None


class ComplianceConfig(BaseModel):
    """Tunable thresholds and weights for all compliance rules."""
    signing_deadline_days: int = 7
    signing_warning_days: int = 2
    frequency_warning_rate: float = 80
    frequency_critical_rate: float = 60
    critical_weight: int = 20
    warning_weight: int = 5
    info_weight: int = 1
    max_deductions: int = 100

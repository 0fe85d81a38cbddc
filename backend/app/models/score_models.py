from enum import Enum
from typing import Optional

from pydantic import Field

from app.models.resume_models import ResumeData, ResumeModel


class ScoreBreakdown(ResumeModel):
    """Four ATS sub-scores, each an integer 0-100."""

    formatting: int
    keywords: int
    content: int
    completeness: int


class ATSScore(ResumeModel):
    """ATS score for a resume, optionally relative to a job description."""

    overall: int  # 0-100 weighted
    breakdown: ScoreBreakdown
    suggestions: list[str] = []
    strengths: list[str] = []
    weaknesses: list[str] = []


class ScoreChange(ResumeModel):
    """Before/after values for one sub-score."""

    section: str
    before: int
    after: int
    change: int


class ScoreComparison(ResumeModel):
    """Before/after ATS score comparison."""

    improvement: int
    changes: list[ScoreChange]


# ── Enhancement Tips ────────────────────────────────────────────────────────


class TipCategory(str, Enum):
    """Severity of an enhancement tip, most severe first."""

    CRITICAL = "critical"
    IMPORTANT = "important"
    RECOMMENDED = "recommended"
    OPTIONAL = "optional"


class TipImpact(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class EnhancementTip(ResumeModel):
    """A single actionable fix for a missing or weak resume field."""

    category: TipCategory
    section: str
    issue: str
    tip: str
    example: Optional[str] = None
    impact: TipImpact


# ── Request / Response Models ───────────────────────────────────────────────


class ATSScoreRequest(ResumeModel):
    """Request to score a resume."""

    resume_data: ResumeData
    job_description: Optional[str] = None


class EnhancementTipsRequest(ResumeModel):
    """Request for enhancement tips. The score is computed when omitted."""

    resume_data: ResumeData
    ats_score: Optional[ATSScore] = None


class EnhancementTipsResponse(ResumeModel):
    tips: list[EnhancementTip] = Field(default_factory=list)


class ScoreCompareRequest(ResumeModel):
    """Request to compare two previously computed scores."""

    before: ATSScore
    after: ATSScore

from typing import Optional

from app.config import settings
from app.models.resume_models import ResumeData, ResumeModel
from app.models.score_models import ATSScore


class EnhancementSuggestion(ResumeModel):
    """One LLM rewrite the user can accept or reject."""

    id: str
    section: str
    original: str
    enhanced: str
    reason: str
    accepted: bool = False


# ── Request Models ──────────────────────────────────────────────────────────


class LLMRequest(ResumeModel):
    """Common provider/model selection for LLM-backed endpoints."""

    provider: str = settings.default_provider
    model_key: str = settings.default_model_key


class EnhanceResumeRequest(LLMRequest):
    """Request to rewrite a whole resume."""

    resume_data: ResumeData
    job_description: Optional[str] = None


class EnhanceContentRequest(LLMRequest):
    """Request to rewrite a single piece of text."""

    content: str = ""
    type: str = "general content"
    job_description: Optional[str] = None


class ImprovementSuggestionsRequest(LLMRequest):
    """Request for free-form improvement advice. The score is computed when omitted."""

    resume_data: ResumeData
    ats_score: Optional[ATSScore] = None


# ── Response Models ─────────────────────────────────────────────────────────


class EnhanceResumeResponse(ResumeModel):
    enhanced: ResumeData
    suggestions: list[EnhancementSuggestion] = []


class EnhanceContentResponse(ResumeModel):
    enhanced_content: str


class ImprovementSuggestionsResponse(ResumeModel):
    suggestions: list[str] = []

from fastapi import APIRouter

from app.models.score_models import (
    ATSScore,
    ATSScoreRequest,
    EnhancementTipsRequest,
    EnhancementTipsResponse,
    ScoreComparison,
    ScoreCompareRequest,
)
from app.services.ats_scorer import calculate_ats_score, compare_scores
from app.services.enhancement_tips import generate_enhancement_tips

router = APIRouter()


@router.post("/score", response_model=ATSScore)
async def score_resume_endpoint(req: ATSScoreRequest):
    """Score a resume, optionally against a job description."""
    return calculate_ats_score(req.resume_data, req.job_description)


@router.post("/tips", response_model=EnhancementTipsResponse)
async def enhancement_tips_endpoint(req: EnhancementTipsRequest):
    """Prioritized fixes for missing or weak resume fields."""
    tips = generate_enhancement_tips(req.resume_data, req.ats_score)
    return EnhancementTipsResponse(tips=tips)


@router.post("/compare", response_model=ScoreComparison)
async def compare_scores_endpoint(req: ScoreCompareRequest):
    """Compare a score before and after editing a resume."""
    return compare_scores(req.before, req.after)

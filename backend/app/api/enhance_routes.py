from fastapi import APIRouter, Depends, HTTPException

from app.models.enhance_models import (
    EnhanceContentRequest,
    EnhanceContentResponse,
    EnhanceResumeRequest,
    EnhanceResumeResponse,
    ImprovementSuggestionsRequest,
    ImprovementSuggestionsResponse,
    LLMRequest,
)
from app.services import enhancer_service
from app.services.ats_scorer import calculate_ats_score
from app.services.llm_service import get_providers_info, resolve_model_id
from app.utils.dependencies import APIKeys, get_api_keys

router = APIRouter()


def _resolve_llm(req: LLMRequest, keys: APIKeys) -> dict[str, str]:
    """Validate provider/model and fetch the API key, or raise 422/400."""
    try:
        resolve_model_id(req.provider, req.model_key)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    api_key = keys.get_key(req.provider)
    if not api_key:
        raise HTTPException(
            status_code=400,
            detail=f"No API key provided for provider '{req.provider}'. "
                   f"Add it on the Settings page first.",
        )
    return {"provider": req.provider, "model_key": req.model_key, "api_key": api_key}


@router.get("/providers")
async def list_providers():
    """
    List all available LLM providers and their models.
    No API keys required — this is public metadata.
    """
    return {"providers": get_providers_info()}


@router.post("/resume", response_model=EnhanceResumeResponse)
async def enhance_resume_endpoint(req: EnhanceResumeRequest, keys: APIKeys = Depends(get_api_keys)):
    """Rewrite experience and project content. Unchanged content is left as-is."""
    llm = _resolve_llm(req, keys)
    enhanced, suggestions = await enhancer_service.enhance_resume(
        req.resume_data, req.job_description, **llm
    )
    return EnhanceResumeResponse(enhanced=enhanced, suggestions=suggestions)


@router.post("/content", response_model=EnhanceContentResponse)
async def enhance_content_endpoint(req: EnhanceContentRequest, keys: APIKeys = Depends(get_api_keys)):
    """Rewrite a single piece of text."""
    if not req.content.strip():
        raise HTTPException(status_code=400, detail="Content is required")
    llm = _resolve_llm(req, keys)
    enhanced = await enhancer_service.enhance_text(
        req.content, req.type, req.job_description, **llm
    )
    return EnhanceContentResponse(enhanced_content=enhanced)


@router.post("/suggestions", response_model=ImprovementSuggestionsResponse)
async def improvement_suggestions_endpoint(
    req: ImprovementSuggestionsRequest,
    keys: APIKeys = Depends(get_api_keys),
):
    """Free-form advice for raising the ATS score."""
    llm = _resolve_llm(req, keys)
    score = req.ats_score or calculate_ats_score(req.resume_data)
    suggestions = await enhancer_service.generate_improvement_suggestions(
        req.resume_data, score.overall, **llm
    )
    return ImprovementSuggestionsResponse(suggestions=suggestions)

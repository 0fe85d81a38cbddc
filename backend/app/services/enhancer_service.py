"""
Enhancer Service — LLM rewrites of resume content.

Responsibilities:
  • Rewrite experience responsibilities bullet-by-bullet
  • Rewrite project descriptions and highlights as free text
  • Produce free-form improvement suggestions for a scored resume

Every LLM call is a single attempt. When it fails, or the model answers
with nothing usable, the original content is returned unchanged so that
enhancement degrades to a no-op instead of failing the request.
"""

from __future__ import annotations

import logging
from itertools import zip_longest

from app.models.enhance_models import EnhancementSuggestion
from app.models.resume_models import ResumeData
from app.prompts import enhance_bullets as bullets_prompt
from app.prompts import enhance_text as text_prompt
from app.prompts import improvement_suggestions as suggestions_prompt
from app.services import llm_service
from app.utils.resume_text import total_skill_items
from app.utils.text_cleanup import normalize_text, parse_numbered_list, split_answer_lines

logger = logging.getLogger(__name__)

BULLET_REASON = "Improved clarity, added action verbs, and made more impactful"
TEXT_REASON = "Optimized keywords and improved technical clarity"


def _jd_parts(module, job_description: str | None) -> tuple[str, str]:
    """(jd_block, jd_requirement) prompt fragments, empty without a JD."""
    if not job_description:
        return "", ""
    return (
        module.JD_BLOCK_TEMPLATE.format(job_description=job_description),
        module.JD_REQUIREMENT,
    )


# ── Single-item Enhancers ────────────────────────────────────────────────────


async def enhance_bullets(
    bullets: list[str],
    kind: str,
    job_description: str | None = None,
    *,
    provider: str,
    model_key: str,
    api_key: str,
) -> list[str]:
    """Rewrite a list of bullets. Returns the originals on any failure."""
    if not bullets:
        return list(bullets)

    jd_block, jd_requirement = _jd_parts(bullets_prompt, job_description)
    messages = [
        {"role": "system", "content": bullets_prompt.SYSTEM_PROMPT},
        {"role": "user", "content": bullets_prompt.USER_PROMPT_TEMPLATE.format(
            kind=kind,
            jd_block=jd_block,
            numbered_items="\n".join(f"{i}. {b}" for i, b in enumerate(bullets, start=1)),
            jd_requirement=jd_requirement,
        )},
    ]

    try:
        raw = await llm_service.complete(
            provider=provider,
            model_key=model_key,
            api_key=api_key,
            messages=messages,
            prompt_name="enhance_bullets",
        )
    except Exception as e:
        logger.warning(f"Bullet enhancement failed for {kind}, keeping original: {e}")
        return list(bullets)

    lines = split_answer_lines(raw)
    if not lines:
        logger.warning(f"Empty bullet enhancement for {kind}, keeping original")
        return list(bullets)
    return lines


async def enhance_text(
    content: str,
    kind: str,
    job_description: str | None = None,
    *,
    provider: str,
    model_key: str,
    api_key: str,
) -> str:
    """Rewrite one block of text. Returns the original on any failure."""
    if not content.strip():
        return content

    jd_block, jd_requirement = _jd_parts(text_prompt, job_description)
    messages = [
        {"role": "system", "content": text_prompt.SYSTEM_PROMPT},
        {"role": "user", "content": text_prompt.USER_PROMPT_TEMPLATE.format(
            kind=kind,
            jd_block=jd_block,
            content=content,
            jd_requirement=jd_requirement,
        )},
    ]

    try:
        raw = await llm_service.complete(
            provider=provider,
            model_key=model_key,
            api_key=api_key,
            messages=messages,
            prompt_name="enhance_text",
        )
    except Exception as e:
        logger.warning(f"Text enhancement failed for {kind}, keeping original: {e}")
        return content

    return normalize_text(raw) or content


# ── Whole Resume ─────────────────────────────────────────────────────────────


async def enhance_resume(
    resume: ResumeData,
    job_description: str | None = None,
    *,
    provider: str,
    model_key: str,
    api_key: str,
) -> tuple[ResumeData, list[EnhancementSuggestion]]:
    """
    Rewrite experience responsibilities and project descriptions/highlights.

    The input resume is not modified. Every changed item is reported as an
    EnhancementSuggestion so the user can accept or reject it.
    """
    llm = {"provider": provider, "model_key": model_key, "api_key": api_key}
    enhanced = resume.model_copy(deep=True)
    suggestions: list[EnhancementSuggestion] = []

    for i, exp in enumerate(enhanced.experience):
        new_resps = await enhance_bullets(
            exp.responsibilities, "responsibilities", job_description, **llm
        )
        for idx, (before, after) in enumerate(zip_longest(exp.responsibilities, new_resps, fillvalue="")):
            if before != after:
                suggestions.append(EnhancementSuggestion(
                    id=f"exp-resp-{i}-{idx}",
                    section=f"Experience - {exp.position}",
                    original=before,
                    enhanced=after,
                    reason=BULLET_REASON,
                ))
        exp.responsibilities = new_resps

    for i, proj in enumerate(enhanced.projects):
        new_description = await enhance_text(
            proj.description, "project description", job_description, **llm
        )
        if new_description != proj.description:
            suggestions.append(EnhancementSuggestion(
                id=f"proj-desc-{i}",
                section=f"Project - {proj.title}",
                original=proj.description,
                enhanced=new_description,
                reason=TEXT_REASON,
            ))
            proj.description = new_description

        joined = "\n".join(proj.highlights)
        new_joined = await enhance_text(joined, "project highlights", job_description, **llm)
        new_highlights = split_answer_lines(new_joined) if new_joined != joined else []
        if new_highlights and new_highlights != proj.highlights:
            suggestions.append(EnhancementSuggestion(
                id=f"proj-high-{i}",
                section=f"Project - {proj.title}",
                original=joined,
                enhanced="\n".join(new_highlights),
                reason=TEXT_REASON,
            ))
            proj.highlights = new_highlights

    logger.info(f"Resume enhancement produced {len(suggestions)} suggestions")
    return enhanced, suggestions


# ── Improvement Suggestions ──────────────────────────────────────────────────


async def generate_improvement_suggestions(
    resume: ResumeData,
    overall: int,
    *,
    provider: str,
    model_key: str,
    api_key: str,
) -> list[str]:
    """Numbered-list advice from the LLM, or the default list on failure."""
    messages = [
        {"role": "system", "content": suggestions_prompt.SYSTEM_PROMPT},
        {"role": "user", "content": suggestions_prompt.USER_PROMPT_TEMPLATE.format(
            overall=overall,
            experience_count=len(resume.experience),
            project_count=len(resume.projects),
            skill_count=total_skill_items(resume),
            education_count=len(resume.education),
        )},
    ]

    try:
        raw = await llm_service.complete(
            provider=provider,
            model_key=model_key,
            api_key=api_key,
            messages=messages,
            prompt_name="improvement_suggestions",
        )
    except Exception as e:
        logger.warning(f"Improvement suggestions failed, using defaults: {e}")
        return list(suggestions_prompt.DEFAULT_SUGGESTIONS)

    return parse_numbered_list(raw) or list(suggestions_prompt.DEFAULT_SUGGESTIONS)

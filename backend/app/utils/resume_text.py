"""
Text extraction helpers shared by the ATS scorer and the tips generator.

Everything here is a pure function of the resume; nothing is cached.
"""

from __future__ import annotations

from app.models.resume_models import Experience, ResumeData
from app.utils.keyword_lists import (
    ACTION_VERBS,
    EMAIL_PATTERN,
    QUANTIFICATION_PATTERN,
    WEAK_VERBS,
)


def word_count(text: str) -> int:
    """Number of whitespace-separated words."""
    return len(text.split())


def first_word(text: str) -> str:
    words = text.split()
    return words[0].lower() if words else ""


def starts_with_action_verb(bullet: str) -> bool:
    return first_word(bullet) in ACTION_VERBS


def is_valid_email(email: str | None) -> bool:
    return bool(email) and EMAIL_PATTERN.match(email) is not None


# ── Bullets ──────────────────────────────────────────────────────────────────


def entry_bullets(exp: Experience) -> list[str]:
    """Responsibilities followed by achievements for one experience entry."""
    return [*exp.responsibilities, *exp.achievements]


def experience_bullets(resume: ResumeData) -> list[str]:
    return [b for exp in resume.experience for b in entry_bullets(exp)]


def all_bullets(resume: ResumeData) -> list[str]:
    """Experience bullets followed by project highlights."""
    bullets = experience_bullets(resume)
    for proj in resume.projects:
        bullets.extend(proj.highlights)
    return bullets


def total_skill_items(resume: ResumeData) -> int:
    return sum(len(cat.items) for cat in resume.skills)


def resume_dates(resume: ResumeData) -> list[str]:
    """Non-empty start/end dates from education and experience."""
    dates: list[str] = []
    for edu in resume.education:
        dates.extend([edu.start_date, edu.end_date])
    for exp in resume.experience:
        dates.extend([exp.start_date, exp.end_date])
    return [d for d in dates if d]


# ── Corpora ──────────────────────────────────────────────────────────────────


def keyword_corpus(resume: ResumeData) -> str:
    """Lower-cased bullets, project descriptions and skills."""
    parts = experience_bullets(resume)
    for proj in resume.projects:
        parts.append(proj.description)
        parts.extend(proj.highlights)
    for cat in resume.skills:
        parts.extend(cat.items)
    return " ".join(parts).lower()


def full_resume_corpus(resume: ResumeData) -> str:
    """Lower-cased text of every field a job description can match against."""
    parts: list[str] = [resume.personal_info.full_name]
    for exp in resume.experience:
        parts.extend([exp.position, exp.company])
        parts.extend(entry_bullets(exp))
    for proj in resume.projects:
        parts.extend([proj.title, proj.description])
        parts.extend(proj.highlights)
        parts.extend(proj.technologies)
    for cat in resume.skills:
        parts.extend(cat.items)
    for edu in resume.education:
        parts.extend([edu.degree, edu.field, edu.institution])
    return " ".join(parts).lower()


# ── Counters ─────────────────────────────────────────────────────────────────


def distinct_terms_present(text: str, terms) -> set[str]:
    """Terms that occur anywhere in text, as substrings."""
    return {term for term in terms if term in text}


def weak_phrase_occurrences(text: str) -> int:
    return sum(text.count(phrase) for phrase in WEAK_VERBS)


def quantification_count(text: str) -> int:
    return sum(1 for _ in QUANTIFICATION_PATTERN.finditer(text))

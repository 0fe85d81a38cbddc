"""
ATS Scorer — rule-based resume scoring, optionally against a job description.

Scoring weights:
  - Formatting:   25%
  - Keywords:     30%
  - Content:      25%
  - Completeness: 20%

Formatting, content and completeness are ordered tables of ScoringRule
entries folded over a starting value. Keywords are counted, capped, then
adjusted by the density rules. Every sub-score ends clamped to 0-100.

Scoring is pure: the same resume and job description always give the same
ATSScore, and no input makes it raise.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from typing import Any, Callable, NamedTuple, Sequence

from app.models.resume_models import ResumeData
from app.models.score_models import ATSScore, ScoreBreakdown, ScoreChange, ScoreComparison
from app.utils.keyword_lists import (
    ACTION_VERBS,
    DIGIT_PATTERN,
    JD_PUNCTUATION_PATTERN,
    JD_STOP_WORDS,
    MONTH_YEAR_PATTERN,
    PASSIVE_VOICE_PATTERN,
    PHONE_PATTERN,
    SLASH_DATE_PATTERN,
    TECHNICAL_KEYWORDS,
    WEAK_VERBS,
    YEAR_ONLY_PATTERN,
)
from app.utils.resume_text import (
    all_bullets,
    distinct_terms_present,
    entry_bullets,
    full_resume_corpus,
    is_valid_email,
    keyword_corpus,
    quantification_count,
    resume_dates,
    starts_with_action_verb,
    total_skill_items,
    weak_phrase_occurrences,
    word_count,
)

logger = logging.getLogger(__name__)

# ── Weights ──────────────────────────────────────────────────────────────────

WEIGHTS = {
    "formatting": 0.25,
    "keywords": 0.30,
    "content": 0.25,
    "completeness": 0.20,
}

# Returned as-is when there is nothing to score
FORMATTING_FLOOR = 20
CONTENT_FLOOR = 15


class ScoringRule(NamedTuple):
    """A predicate over some subject and the delta added when it holds."""

    label: str
    applies: Callable[[Any], bool]
    delta: int


def apply_rules(rules: Sequence[ScoringRule], subject: Any, score: int = 0) -> tuple[int, list[str]]:
    """Fold rules over subject starting from score. Returns (score, fired labels)."""
    fired: list[str] = []
    for rule in rules:
        if rule.applies(subject):
            score += rule.delta
            fired.append(rule.label)
    return score, fired


def _clamp(score: float) -> int:
    return int(max(0, min(100, score)))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


# ── Public API ───────────────────────────────────────────────────────────────


def calculate_ats_score(resume: ResumeData, job_description: str | None = None) -> ATSScore:
    """Score a resume, against a job description when one is given."""
    breakdown = ScoreBreakdown(
        formatting=calculate_formatting_score(resume),
        keywords=(
            calculate_keyword_score_with_jd(resume, job_description)
            if job_description
            else calculate_keyword_score(resume)
        ),
        content=calculate_content_score(resume),
        completeness=calculate_completeness_score(resume),
    )

    overall = _clamp(_round_half_up(
        breakdown.formatting * WEIGHTS["formatting"]
        + breakdown.keywords * WEIGHTS["keywords"]
        + breakdown.content * WEIGHTS["content"]
        + breakdown.completeness * WEIGHTS["completeness"]
    ))

    suggestions, strengths, weaknesses = generate_personalized_feedback(
        resume, breakdown, job_description
    )

    logger.debug(
        "ATS score: overall=%d formatting=%d keywords=%d content=%d completeness=%d jd=%s",
        overall, breakdown.formatting, breakdown.keywords, breakdown.content,
        breakdown.completeness, bool(job_description),
    )

    return ATSScore(
        overall=overall,
        breakdown=breakdown,
        suggestions=suggestions,
        strengths=strengths,
        weaknesses=weaknesses,
    )


def compare_scores(before: ATSScore, after: ATSScore) -> ScoreComparison:
    """Overall improvement plus a per-section before/after list."""
    changes = [
        ScoreChange(
            section=section.title(),
            before=getattr(before.breakdown, section),
            after=getattr(after.breakdown, section),
            change=getattr(after.breakdown, section) - getattr(before.breakdown, section),
        )
        for section in WEIGHTS
    ]
    return ScoreComparison(improvement=after.overall - before.overall, changes=changes)


# ── Formatting ───────────────────────────────────────────────────────────────


def date_format_families(resume: ResumeData) -> int:
    """How many of month-year, slash and year-only formats the resume dates use."""
    dates = resume_dates(resume)
    families = (
        any(MONTH_YEAR_PATTERN.search(d) for d in dates),
        any(SLASH_DATE_PATTERN.search(d) for d in dates),
        any(YEAR_ONLY_PATTERN.match(d) for d in dates),
    )
    return sum(families)


def action_verb_ratio(bullets: Sequence[str]) -> float:
    """Fraction of bullets whose first word is an action verb (0 when empty)."""
    if not bullets:
        return 0.0
    return sum(1 for b in bullets if starts_with_action_verb(b)) / len(bullets)


FORMATTING_RULES: tuple[ScoringRule, ...] = (
    ScoringRule(
        "Invalid email format",
        lambda r: not is_valid_email(r.personal_info.email),
        -10,
    ),
    ScoringRule(
        "Phone number missing or invalid",
        lambda r: PHONE_PATTERN.search(r.personal_info.phone) is None,
        -5,
    ),
    ScoringRule(
        "Inconsistent date formats",
        lambda r: date_format_families(r) > 1,
        -10,
    ),
    ScoringRule(
        "Too few bullet points",
        lambda r: len(all_bullets(r)) < 5,
        -15,
    ),
    ScoringRule(
        "Too many bullet points - may be overwhelming",
        lambda r: len(all_bullets(r)) > 30,
        -5,
    ),
    ScoringRule(
        "Many bullet points don't start with action verbs",
        lambda r: action_verb_ratio(all_bullets(r)) < 0.5,
        -10,
    ),
)


def calculate_formatting_score(resume: ResumeData) -> int:
    if not (resume.education or resume.experience or resume.projects):
        return FORMATTING_FLOOR

    score, issues = apply_rules(FORMATTING_RULES, resume, 100)
    if issues:
        logger.debug(f"Formatting issues: {issues}")
    return max(0, score)


# ── Keywords ─────────────────────────────────────────────────────────────────


class KeywordFacts(NamedTuple):
    """Counts measured over the lower-cased keyword corpus."""

    action_verbs: int
    weak_phrases: int
    technical_keywords: int
    quantifications: int
    total_words: int

    @property
    def density(self) -> float:
        """Action verbs plus technical keywords, as a percentage of all words."""
        if not self.total_words:
            return 0.0
        return (self.action_verbs + self.technical_keywords) / self.total_words * 100


def keyword_facts(text: str) -> KeywordFacts:
    return KeywordFacts(
        action_verbs=len(distinct_terms_present(text, ACTION_VERBS)),
        weak_phrases=weak_phrase_occurrences(text),
        technical_keywords=len(distinct_terms_present(text, TECHNICAL_KEYWORDS)),
        quantifications=quantification_count(text),
        total_words=word_count(text),
    )


KEYWORD_DENSITY_RULES: tuple[ScoringRule, ...] = (
    ScoringRule(
        "Too few keywords relative to content",
        lambda f: f.total_words > 0 and f.density < 2,
        -10,
    ),
    ScoringRule(
        "Keyword stuffing",
        lambda f: f.total_words > 0 and f.density > 15,
        -5,
    ),
)


def calculate_keyword_score(resume: ResumeData) -> int:
    """Keyword strength without a job description."""
    facts = keyword_facts(keyword_corpus(resume))

    score = (
        min(35, facts.action_verbs * 2)
        - facts.weak_phrases * 3
        + min(30, facts.technical_keywords * 2)
        + min(35, facts.quantifications * 4)
    )
    score, _ = apply_rules(KEYWORD_DENSITY_RULES, facts, score)
    return _clamp(score)


def tokenize_job_description(job_description: str) -> list[str]:
    """Lower-cased JD words longer than 3 characters, stop words removed, in order."""
    text = JD_PUNCTUATION_PATTERN.sub(" ", job_description.lower())
    return [w for w in text.split() if len(w) > 3 and w not in JD_STOP_WORDS]


def important_keywords(tokens: Sequence[str]) -> list[str]:
    """Tokens mentioned more than once, most frequent first."""
    freq = Counter(tokens)
    repeated = [word for word, count in freq.items() if count > 1]
    return sorted(repeated, key=lambda word: freq[word], reverse=True)


def calculate_keyword_score_with_jd(resume: ResumeData, job_description: str) -> int:
    """
    Keyword match against a job description.

    60% weight on repeated JD keywords, 40% on all unique JD keywords.
    Falls back to calculate_keyword_score when the JD has no usable words.
    """
    tokens = tokenize_job_description(job_description)
    unique_tokens = list(dict.fromkeys(tokens))
    if not unique_tokens:
        return calculate_keyword_score(resume)

    resume_text = full_resume_corpus(resume)
    important = important_keywords(tokens)

    important_score = 0.0
    if important:
        matched = sum(1 for kw in important if kw in resume_text)
        important_score = matched / len(important) * 60

    general_matched = sum(1 for kw in unique_tokens if kw in resume_text)
    general_score = general_matched / len(unique_tokens) * 40

    return _clamp(_round_half_up(important_score + general_score))


# ── Content ──────────────────────────────────────────────────────────────────

# Applied to every responsibility and achievement of every experience entry
BULLET_RULES: tuple[ScoringRule, ...] = (
    ScoringRule("Bullet too short", lambda b: word_count(b) < 8, -3),
    ScoringRule("Bullet too long", lambda b: word_count(b) > 40, -2),
    ScoringRule(
        "Starts with a weak phrase",
        lambda b: b.strip().lower().startswith(WEAK_VERBS),
        -2,
    ),
    ScoringRule(
        "Passive voice",
        lambda b: PASSIVE_VOICE_PATTERN.search(b.lower()) is not None,
        -1,
    ),
    ScoringRule("Quantified", lambda b: DIGIT_PATTERN.search(b) is not None, 1),
)

EXPERIENCE_ENTRY_RULES: tuple[ScoringRule, ...] = (
    ScoringRule(
        "Responsibilities without achievements",
        lambda e: not e.achievements and bool(e.responsibilities),
        -5,
    ),
    ScoringRule(
        "Balanced responsibilities and achievements",
        lambda e: bool(e.achievements) and bool(e.responsibilities),
        2,
    ),
)

PROJECT_RULES: tuple[ScoringRule, ...] = (
    ScoringRule("Project description too short", lambda p: word_count(p.description) < 10, -4),
    ScoringRule("Project description well sized", lambda p: 10 <= word_count(p.description) <= 40, 2),
    ScoringRule("No technologies listed", lambda p: not p.technologies, -5),
    ScoringRule("Three or more technologies", lambda p: len(p.technologies) >= 3, 2),
    ScoringRule("No highlights", lambda p: not p.highlights, -3),
    ScoringRule("Two or more highlights", lambda p: len(p.highlights) >= 2, 2),
    ScoringRule("Demo or source link", lambda p: bool(p.link or p.github), 2),
)

SKILLS_RULES: tuple[ScoringRule, ...] = (
    ScoringRule("No skills section", lambda r: not r.skills, -20),
    ScoringRule(
        "Too few skills",
        lambda r: bool(r.skills) and total_skill_items(r) < 5,
        -15,
    ),
    ScoringRule(
        "Well-sized skills list",
        lambda r: bool(r.skills) and 10 <= total_skill_items(r) <= 20,
        5,
    ),
    ScoringRule(
        "Too many skills",
        lambda r: bool(r.skills) and total_skill_items(r) > 30,
        -5,
    ),
    ScoringRule("Skills grouped into categories", lambda r: len(r.skills) > 1, 3),
)


def calculate_content_score(resume: ResumeData) -> int:
    if not (resume.experience or resume.projects or resume.skills):
        return CONTENT_FLOOR

    score = 100
    for exp in resume.experience:
        for bullet in entry_bullets(exp):
            score, _ = apply_rules(BULLET_RULES, bullet, score)
        score, _ = apply_rules(EXPERIENCE_ENTRY_RULES, exp, score)

    for proj in resume.projects:
        score, _ = apply_rules(PROJECT_RULES, proj, score)

    score, _ = apply_rules(SKILLS_RULES, resume, score)
    return _clamp(score)


# ── Completeness ─────────────────────────────────────────────────────────────


def _education_complete(resume: ResumeData) -> bool:
    return bool(resume.education) and all(
        e.institution and e.degree and e.end_date for e in resume.education
    )


COMPLETENESS_RULES: tuple[ScoringRule, ...] = (
    # Personal info, 30 points
    ScoringRule("Full name", lambda r: len(r.personal_info.full_name) > 2, 5),
    ScoringRule("Valid email", lambda r: is_valid_email(r.personal_info.email), 5),
    ScoringRule("Phone number", lambda r: len(r.personal_info.phone) >= 10, 5),
    ScoringRule("Location", lambda r: len(r.personal_info.location) > 2, 5),
    ScoringRule("LinkedIn profile", lambda r: bool(r.personal_info.linkedin), 5),
    ScoringRule(
        "Portfolio or GitHub",
        lambda r: bool(r.personal_info.website or r.personal_info.github),
        5,
    ),
    # Education, 20 points
    ScoringRule("Education section", lambda r: bool(r.education), 15),
    ScoringRule("Complete education entries", _education_complete, 5),
    # Experience, 25 points
    ScoringRule("Work experience", lambda r: len(r.experience) >= 1, 10),
    ScoringRule("Two or more roles", lambda r: len(r.experience) >= 2, 8),
    ScoringRule("Three or more roles", lambda r: len(r.experience) >= 3, 7),
    # Skills, 15 points (partial credit below)
    ScoringRule("Five or more skills", lambda r: total_skill_items(r) >= 5, 15),
    # Projects, 10 points
    ScoringRule("Projects section", lambda r: len(r.projects) >= 1, 5),
    ScoringRule("Two or more projects", lambda r: len(r.projects) >= 2, 5),
)


def calculate_completeness_score(resume: ResumeData) -> int:
    score, _ = apply_rules(COMPLETENESS_RULES, resume, 0)

    skill_count = total_skill_items(resume)
    if skill_count < 5:
        score += skill_count * 3

    return min(100, score)


# ── Feedback ─────────────────────────────────────────────────────────────────


def generate_personalized_feedback(
    resume: ResumeData,
    breakdown: ScoreBreakdown,
    job_description: str | None = None,
) -> tuple[list[str], list[str], list[str]]:
    """
    Build (suggestions, strengths, weaknesses) from the breakdown.

    Counts are re-measured over experience bullets and project highlights
    so each message can quote them.
    """
    suggestions: list[str] = []
    strengths: list[str] = []
    weaknesses: list[str] = []

    bullets = all_bullets(resume)
    bullet_text = " ".join(bullets).lower()

    action_verb_count = len(distinct_terms_present(bullet_text, ACTION_VERBS))
    weak_verb_count = weak_phrase_occurrences(bullet_text)
    quantified = quantification_count(bullet_text)

    # Formatting
    if breakdown.formatting < 80:
        if bullets:
            percentage = _round_half_up(action_verb_ratio(bullets) * 100)
            suggestions.append(
                f"Only {percentage}% of your bullet points start with strong action verbs - aim for 80%+"
            )
        weaknesses.append("Formatting and structure need improvement")
    else:
        strengths.append(f"Well-formatted resume with {len(bullets)} clear bullet points")

    # Keywords
    if breakdown.keywords < 70:
        if action_verb_count < 5:
            suggestions.append(
                f"You're using only {action_verb_count} different action verbs - "
                "add more variety (achieved, spearheaded, optimized, etc.)"
            )
        if weak_verb_count > 0:
            suggestions.append(
                f'Remove {weak_verb_count} instances of weak phrases like "responsible for" or "worked on"'
            )
        if quantified < 3:
            suggestions.append(
                f"Add specific metrics - currently only {quantified} quantified achievements found"
            )
        weaknesses.append("Limited use of impactful keywords and metrics")
    else:
        strengths.append(
            f"Strong keyword optimization with {action_verb_count} action verbs "
            f"and {quantified} quantified achievements"
        )

    # Content
    if breakdown.content < 75:
        short_bullets = sum(1 for b in bullets if word_count(b) < 8)
        if short_bullets > 0:
            suggestions.append(
                f"{short_bullets} bullet points are too short - expand with more detail about impact and methods"
            )
        without_achievements = sum(1 for e in resume.experience if not e.achievements)
        if without_achievements > 0:
            suggestions.append(
                f"{without_achievements} experience entries lack achievement bullets - add measurable results"
            )
        weaknesses.append("Content lacks depth and specific achievements")
    else:
        strengths.append(f"Comprehensive content with {len(bullets)} detailed bullet points")

    # Completeness
    if breakdown.completeness < 80:
        info = resume.personal_info
        missing: list[str] = []
        if not info.linkedin:
            missing.append("LinkedIn profile")
        if not info.github and not info.website:
            missing.append("portfolio/GitHub link")
        if len(resume.experience) < 2:
            missing.append("more work experience")
        if not resume.projects:
            missing.append("projects section")
        if not resume.skills:
            missing.append("skills section")
        if missing:
            suggestions.append(f"Add: {', '.join(missing)}")
        weaknesses.append("Resume is missing key sections")
    else:
        strengths.append(
            f"Complete resume with {len(resume.experience)} experiences, "
            f"{len(resume.projects)} projects, and {total_skill_items(resume)} skills"
        )

    if job_description and breakdown.keywords < 80:
        suggestions.append("Tailor your resume to better match the job description keywords")

    return suggestions, strengths, weaknesses

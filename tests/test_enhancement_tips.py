"""
Tests for the enhancement tips rule table.
"""
from app.models.resume_models import Experience, ResumeData, SkillCategory
from app.models.score_models import TipCategory
from app.services.ats_scorer import calculate_ats_score
from app.services.enhancement_tips import (
    CATEGORY_ORDER,
    IMPACT_ORDER,
    analyze_content_quality,
    analyze_experience,
    analyze_personal_info,
    analyze_skills,
    generate_enhancement_tips,
)


def _issues(tips):
    return [t.issue for t in tips]


def test_empty_resume_tips_are_sorted(empty_resume):
    tips = generate_enhancement_tips(empty_resume)
    issues = _issues(tips)

    for expected in (
        "No work experience listed",
        "No education listed",
        "No skills listed",
        "No projects listed",
        "Missing LinkedIn profile",
        "Low ATS score",
        "No certifications listed",
    ):
        assert expected in issues

    keys = [(CATEGORY_ORDER[t.category], IMPACT_ORDER[t.impact]) for t in tips]
    assert keys == sorted(keys)
    assert tips[0].category == TipCategory.CRITICAL
    assert tips[-1].issue == "No certifications listed"


def test_score_is_computed_when_missing(scenario_resume):
    score = calculate_ats_score(scenario_resume)
    assert generate_enhancement_tips(scenario_resume) == generate_enhancement_tips(scenario_resume, score)


def test_strong_resume_has_no_contact_or_critical_tips(strong_resume):
    tips = generate_enhancement_tips(strong_resume)
    assert analyze_personal_info(strong_resume.personal_info) == []
    assert all(t.category != TipCategory.CRITICAL for t in tips)
    assert "No certifications listed" not in _issues(tips)


def test_experience_entry_checks():
    resume = ResumeData(experience=[Experience(
        company="Initech",
        position="Analyst",
        start_date="Jan 2020",
        responsibilities=["Did reports"],
    )])
    issues = _issues(analyze_experience(resume))
    assert issues == [
        "Limited work history",
        "Analyst: Missing dates",
        "Analyst: Missing location",
        "Analyst: Too few bullet points",
        "Analyst: No quantifiable metrics",
        "Analyst: Weak action verbs",
        "Analyst: Bullet point 1 too short",
    ]


def test_untitled_experience_uses_placeholder():
    resume = ResumeData(experience=[Experience(company="", position="")])
    issues = _issues(analyze_experience(resume))
    assert "Experience entry 1: Missing company name" in issues
    assert "Experience entry 1: Missing job title" in issues
    assert "Position: No bullet points" in issues


def test_skills_not_categorized():
    items = [f"skill{i}" for i in range(11)]
    resume = ResumeData(skills=[SkillCategory(category="Everything", items=items)])
    assert _issues(analyze_skills(resume)) == ["Skills not categorized"]


def test_repetitive_language():
    bullet = "Delivered reports, delivered dashboards, delivered audits"
    resume = ResumeData(experience=[Experience(
        company="Initech", position="Analyst", responsibilities=[bullet, bullet],
    )])
    tips = analyze_content_quality(resume)
    assert _issues(tips) == ["Repetitive language"]
    assert "delivered" in tips[0].tip


def test_tips_serialize_enums(empty_resume):
    tip = generate_enhancement_tips(empty_resume)[0].model_dump(mode="json", by_alias=True)
    assert tip["category"] == "critical"
    assert tip["impact"] in {"high", "medium", "low"}

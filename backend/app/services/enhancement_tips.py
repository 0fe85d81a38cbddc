"""
Enhancement Tips — table-driven checks for missing or weak resume fields.

Each section analyzer returns EnhancementTip records; the combined list is
ordered by category (critical → optional) and then by impact (high → low).
Tips only read the resume and its ATS score; nothing is stored.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Callable, NamedTuple, Optional

from app.models.resume_models import PersonalInfo, ResumeData
from app.models.score_models import ATSScore, EnhancementTip, TipCategory, TipImpact
from app.services.ats_scorer import calculate_ats_score
from app.utils.keyword_lists import CORE_ACTION_VERBS, METRIC_PATTERN, PASSIVE_INDICATORS
from app.utils.resume_text import entry_bullets, total_skill_items

logger = logging.getLogger(__name__)

CATEGORY_ORDER = {
    TipCategory.CRITICAL: 0,
    TipCategory.IMPORTANT: 1,
    TipCategory.RECOMMENDED: 2,
    TipCategory.OPTIONAL: 3,
}
IMPACT_ORDER = {TipImpact.HIGH: 0, TipImpact.MEDIUM: 1, TipImpact.LOW: 2}

# Bullet length limits, in characters
SHORT_BULLET_CHARS = 30
LONG_BULLET_CHARS = 200

# ATS score thresholds below which an optimization tip is added
LOW_OVERALL = 60
LOW_KEYWORDS = 70
LOW_FORMATTING = 80


def _tip(
    category: TipCategory,
    section: str,
    issue: str,
    tip: str,
    impact: TipImpact,
    example: Optional[str] = None,
) -> EnhancementTip:
    return EnhancementTip(
        category=category, section=section, issue=issue, tip=tip, example=example, impact=impact,
    )


# ── Public API ───────────────────────────────────────────────────────────────


def generate_enhancement_tips(
    resume: ResumeData,
    ats_score: ATSScore | None = None,
) -> list[EnhancementTip]:
    """All tips for a resume, most severe first. Scores the resume when no score is given."""
    if ats_score is None:
        ats_score = calculate_ats_score(resume)

    tips: list[EnhancementTip] = []
    tips.extend(analyze_personal_info(resume.personal_info))
    tips.extend(analyze_experience(resume))
    tips.extend(analyze_education(resume))
    tips.extend(analyze_skills(resume))
    tips.extend(analyze_projects(resume))
    tips.extend(analyze_certifications(resume))
    tips.extend(analyze_content_quality(resume))
    tips.extend(analyze_ats_optimization(ats_score))

    logger.debug(f"Generated {len(tips)} enhancement tips")
    return sorted(tips, key=lambda t: (CATEGORY_ORDER[t.category], IMPACT_ORDER[t.impact]))


# ── Contact Information ──────────────────────────────────────────────────────


class ContactCheck(NamedTuple):
    """A contact-info field check and the tip emitted when it fails."""

    is_missing: Callable[[PersonalInfo], bool]
    category: TipCategory
    issue: str
    tip: str
    impact: TipImpact
    example: Optional[str] = None


CONTACT_CHECKS: tuple[ContactCheck, ...] = (
    ContactCheck(
        lambda p: len(p.full_name) < 3,
        TipCategory.CRITICAL,
        "Missing or incomplete name",
        "Add your full name at the top of your resume in a clear, professional font",
        TipImpact.HIGH,
    ),
    ContactCheck(
        lambda p: "@" not in p.email,
        TipCategory.CRITICAL,
        "Missing or invalid email address",
        "Include a professional email address (avoid nicknames or unprofessional handles)",
        TipImpact.HIGH,
        "john.doe@email.com instead of coolkid123@email.com",
    ),
    ContactCheck(
        lambda p: not p.phone,
        TipCategory.IMPORTANT,
        "Missing phone number",
        "Add your phone number with country code for international applications",
        TipImpact.HIGH,
        "+1 (555) 123-4567",
    ),
    ContactCheck(
        lambda p: not p.location,
        TipCategory.RECOMMENDED,
        "Missing location",
        "Include your city and state/country (helps with location-based job searches)",
        TipImpact.MEDIUM,
        "San Francisco, CA or Remote",
    ),
    ContactCheck(
        lambda p: not p.linkedin,
        TipCategory.IMPORTANT,
        "Missing LinkedIn profile",
        "Add your LinkedIn profile URL - 87% of recruiters use LinkedIn to vet candidates",
        TipImpact.HIGH,
        "linkedin.com/in/yourprofile",
    ),
    ContactCheck(
        lambda p: not p.github and not p.website,
        TipCategory.RECOMMENDED,
        "Missing portfolio/GitHub link",
        "For technical roles, include your GitHub profile or personal website to showcase projects",
        TipImpact.MEDIUM,
    ),
)


def analyze_personal_info(info: PersonalInfo) -> list[EnhancementTip]:
    return [
        _tip(c.category, "Contact Information", c.issue, c.tip, c.impact, c.example)
        for c in CONTACT_CHECKS
        if c.is_missing(info)
    ]


# ── Experience ───────────────────────────────────────────────────────────────


def analyze_experience(resume: ResumeData) -> list[EnhancementTip]:
    section = "Experience"
    tips: list[EnhancementTip] = []

    if not resume.experience:
        tips.append(_tip(
            TipCategory.CRITICAL, section, "No work experience listed",
            "Add your work experience, internships, or relevant volunteer work",
            TipImpact.HIGH,
        ))
        return tips

    if len(resume.experience) < 2:
        tips.append(_tip(
            TipCategory.RECOMMENDED, section, "Limited work history",
            "Include internships, freelance work, or volunteer positions to show more experience",
            TipImpact.MEDIUM,
        ))

    for index, exp in enumerate(resume.experience, start=1):
        role = exp.position or "Position"

        if len(exp.company) < 2:
            tips.append(_tip(
                TipCategory.CRITICAL, section, f"Experience entry {index}: Missing company name",
                "Add the company name for this position", TipImpact.HIGH,
            ))
        if len(exp.position) < 2:
            tips.append(_tip(
                TipCategory.CRITICAL, section, f"Experience entry {index}: Missing job title",
                "Add your job title/position for this role", TipImpact.HIGH,
            ))
        if not exp.start_date or not exp.end_date:
            tips.append(_tip(
                TipCategory.IMPORTANT, section, f"{role}: Missing dates",
                'Include start and end dates (or "Present" for current roles)',
                TipImpact.HIGH, "Jan 2020 - Present",
            ))
        if not exp.location:
            tips.append(_tip(
                TipCategory.RECOMMENDED, section, f"{role}: Missing location",
                'Add the company location (city, state/country or "Remote")',
                TipImpact.MEDIUM,
            ))
        if not exp.responsibilities and not exp.achievements:
            tips.append(_tip(
                TipCategory.CRITICAL, section, f"{role}: No bullet points",
                "Add 3-5 bullet points describing your key responsibilities and achievements",
                TipImpact.HIGH,
                "• Developed scalable microservices handling 1M+ requests/day using Node.js",
            ))
        if 0 < len(exp.responsibilities) < 3:
            tips.append(_tip(
                TipCategory.IMPORTANT, section, f"{role}: Too few bullet points",
                "Add more bullet points (aim for 3-5 per role) to fully showcase your impact",
                TipImpact.MEDIUM,
            ))

        text = " ".join(entry_bullets(exp))
        if not METRIC_PATTERN.search(text):
            tips.append(_tip(
                TipCategory.IMPORTANT, section, f"{role}: No quantifiable metrics",
                "Add numbers, percentages, or metrics to demonstrate impact",
                TipImpact.HIGH,
                'Instead of "Improved performance" → '
                '"Improved system performance by 40%, reducing load time from 3s to 1.8s"',
            ))

        lowered = text.lower()
        if not any(verb in lowered for verb in CORE_ACTION_VERBS):
            tips.append(_tip(
                TipCategory.IMPORTANT, section, f"{role}: Weak action verbs",
                "Start bullet points with strong action verbs",
                TipImpact.MEDIUM,
                "Use: Led, Developed, Achieved, Optimized, Spearheaded "
                "instead of: Responsible for, Worked on, Helped with",
            ))

        for i, resp in enumerate(exp.responsibilities, start=1):
            if len(resp) < SHORT_BULLET_CHARS:
                tips.append(_tip(
                    TipCategory.RECOMMENDED, section, f"{role}: Bullet point {i} too short",
                    "Expand this bullet point with more detail about your impact and methods used",
                    TipImpact.LOW,
                ))
            if len(resp) > LONG_BULLET_CHARS:
                tips.append(_tip(
                    TipCategory.RECOMMENDED, section, f"{role}: Bullet point {i} too long",
                    "Shorten this bullet point - aim for 1-2 lines maximum",
                    TipImpact.LOW,
                ))

    return tips


# ── Education ────────────────────────────────────────────────────────────────


def analyze_education(resume: ResumeData) -> list[EnhancementTip]:
    section = "Education"
    if not resume.education:
        return [_tip(
            TipCategory.CRITICAL, section, "No education listed",
            "Add your educational background (degree, institution, graduation year)",
            TipImpact.HIGH,
        )]

    tips: list[EnhancementTip] = []
    for index, edu in enumerate(resume.education, start=1):
        school = edu.institution or "Institution"
        if len(edu.institution) < 2:
            tips.append(_tip(
                TipCategory.CRITICAL, section, f"Education entry {index}: Missing institution name",
                "Add the name of your university or educational institution", TipImpact.HIGH,
            ))
        if len(edu.degree) < 2:
            tips.append(_tip(
                TipCategory.CRITICAL, section, f"Education entry {index}: Missing degree",
                "Specify your degree (e.g., Bachelor of Science in Computer Science)", TipImpact.HIGH,
            ))
        if not edu.end_date:
            tips.append(_tip(
                TipCategory.IMPORTANT, section, f"{school}: Missing graduation date",
                "Add your graduation year or expected graduation date",
                TipImpact.MEDIUM, "2020 or Expected May 2024",
            ))
        if not edu.gpa:
            tips.append(_tip(
                TipCategory.OPTIONAL, section, f"{school}: No GPA listed",
                "If your GPA is 3.5+ or you have academic achievements, include them",
                TipImpact.LOW, "GPA: 3.8/4.0 or Dean's List",
            ))
    return tips


# ── Skills ───────────────────────────────────────────────────────────────────


def analyze_skills(resume: ResumeData) -> list[EnhancementTip]:
    section = "Skills"
    if not resume.skills:
        return [_tip(
            TipCategory.CRITICAL, section, "No skills listed",
            "Add a skills section with relevant technical and soft skills",
            TipImpact.HIGH,
            "Languages: JavaScript, Python, Java\nFrameworks: React, Node.js, Django\nTools: Git, Docker, AWS",
        )]

    tips: list[EnhancementTip] = []
    total = total_skill_items(resume)
    if total < 5:
        tips.append(_tip(
            TipCategory.IMPORTANT, section, "Too few skills listed",
            "Add more relevant skills (aim for 10-15 total across categories)",
            TipImpact.MEDIUM,
        ))
    if len(resume.skills) == 1 and total > 10:
        tips.append(_tip(
            TipCategory.RECOMMENDED, section, "Skills not categorized",
            "Organize skills into categories for better readability",
            TipImpact.MEDIUM, "Separate into: Languages, Frameworks, Tools, Soft Skills",
        ))
    return tips


# ── Projects ─────────────────────────────────────────────────────────────────


def analyze_projects(resume: ResumeData) -> list[EnhancementTip]:
    section = "Projects"
    if not resume.projects:
        return [_tip(
            TipCategory.IMPORTANT, section, "No projects listed",
            "Add 2-3 relevant projects to demonstrate practical skills",
            TipImpact.HIGH,
            "Personal projects, hackathons, open-source contributions, or academic projects",
        )]

    tips: list[EnhancementTip] = []
    for index, proj in enumerate(resume.projects, start=1):
        name = proj.title or "Project"
        if len(proj.title) < 2:
            tips.append(_tip(
                TipCategory.CRITICAL, section, f"Project {index}: Missing title",
                "Add a clear, descriptive title for this project", TipImpact.HIGH,
            ))
        if len(proj.description) < 20:
            tips.append(_tip(
                TipCategory.IMPORTANT, section, f"{name}: Missing or short description",
                "Add a detailed description explaining what the project does and its purpose",
                TipImpact.MEDIUM,
            ))
        if not proj.technologies:
            tips.append(_tip(
                TipCategory.IMPORTANT, section, f"{name}: No technologies listed",
                "List the technologies, frameworks, and tools used",
                TipImpact.HIGH, "React, Node.js, MongoDB, AWS",
            ))
        if not proj.highlights:
            tips.append(_tip(
                TipCategory.RECOMMENDED, section, f"{name}: No highlights or achievements",
                "Add 2-3 bullet points highlighting key features or achievements",
                TipImpact.MEDIUM,
                "• Implemented real-time chat with WebSocket\n• Deployed to AWS with 99.9% uptime",
            ))
        if not proj.link and not proj.github:
            tips.append(_tip(
                TipCategory.RECOMMENDED, section, f"{name}: No demo or source link",
                "Include a link to the live demo or GitHub repository",
                TipImpact.MEDIUM,
            ))
    return tips


# ── Certifications ───────────────────────────────────────────────────────────


def analyze_certifications(resume: ResumeData) -> list[EnhancementTip]:
    if resume.certifications:
        return []
    return [_tip(
        TipCategory.OPTIONAL, "Certifications", "No certifications listed",
        "If you have relevant certifications, add them to stand out",
        TipImpact.LOW, "AWS Certified Solutions Architect, Google Cloud Professional, etc.",
    )]


# ── Content Quality ──────────────────────────────────────────────────────────


def analyze_content_quality(resume: ResumeData) -> list[EnhancementTip]:
    section = "Content Quality"
    tips: list[EnhancementTip] = []

    parts: list[str] = []
    for exp in resume.experience:
        parts.extend(entry_bullets(exp))
    for proj in resume.projects:
        parts.append(proj.description)
        parts.extend(proj.highlights)
    words = " ".join(parts).lower().split()

    # Distinct passive markers present, not occurrences
    passive_markers = set(PASSIVE_INDICATORS) & set(words)
    if len(passive_markers) > 5:
        tips.append(_tip(
            TipCategory.RECOMMENDED, section, "Excessive passive voice",
            "Use active voice instead of passive voice for stronger impact",
            TipImpact.MEDIUM, 'Instead of "Was responsible for managing" → "Managed"',
        ))

    freq = Counter(w for w in words if len(w) > 5)
    repeated = [word for word, count in freq.items() if count > 5]
    if repeated:
        tips.append(_tip(
            TipCategory.RECOMMENDED, section, "Repetitive language",
            f"Avoid overusing words like: {', '.join(repeated[:3])}. Use synonyms for variety",
            TipImpact.LOW,
        ))
    return tips


# ── ATS Optimization ─────────────────────────────────────────────────────────


def analyze_ats_optimization(ats_score: ATSScore) -> list[EnhancementTip]:
    section = "ATS Optimization"
    tips: list[EnhancementTip] = []

    if ats_score.overall < LOW_OVERALL:
        tips.append(_tip(
            TipCategory.CRITICAL, section, "Low ATS score",
            "Your resume may not pass Applicant Tracking Systems. Focus on the critical issues first",
            TipImpact.HIGH,
        ))
    if ats_score.breakdown.keywords < LOW_KEYWORDS:
        tips.append(_tip(
            TipCategory.IMPORTANT, section, "Low keyword score",
            "Add more industry-specific keywords and technical terms relevant to your target role",
            TipImpact.HIGH,
        ))
    if ats_score.breakdown.formatting < LOW_FORMATTING:
        tips.append(_tip(
            TipCategory.IMPORTANT, section, "Formatting issues",
            "Use consistent formatting, standard section headers, "
            "and avoid tables/graphics that ATS can't parse",
            TipImpact.HIGH,
        ))
    return tips

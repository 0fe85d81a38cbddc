"""
Word lists and patterns used by the ATS scorer and the enhancement tips.

Tuning any of these changes scores, so they are kept here as data,
separate from the scoring rules.
"""

from __future__ import annotations

import re

# Strong verbs expected as the first word of a bullet point
ACTION_VERBS: frozenset[str] = frozenset({
    "achieved", "improved", "developed", "created", "managed", "led", "designed",
    "implemented", "increased", "reduced", "optimized", "streamlined", "launched",
    "built", "established", "coordinated", "executed", "delivered", "analyzed",
    "collaborated", "spearheaded", "transformed", "generated", "accelerated",
    "engineered", "architected", "pioneered", "drove", "initiated", "orchestrated",
    "revamped", "enhanced", "automated", "scaled", "modernized", "integrated",
})

# Subset the tips generator looks for inside an experience entry
CORE_ACTION_VERBS: frozenset[str] = frozenset({
    "achieved", "improved", "developed", "created", "managed", "led", "designed",
    "implemented", "increased", "reduced",
})

WEAK_VERBS: tuple[str, ...] = (
    "responsible for", "worked on", "helped with", "assisted", "participated",
    "involved in", "tasked with", "duties included", "was part of",
)

TECHNICAL_KEYWORDS: frozenset[str] = frozenset({
    "api", "database", "cloud", "agile", "scrum", "ci/cd", "devops", "frontend",
    "backend", "fullstack", "architecture", "scalable", "performance", "security",
    "testing", "deployment", "integration", "automation", "optimization", "microservices",
    "kubernetes", "docker", "aws", "azure", "gcp", "react", "angular", "vue",
    "node", "python", "java", "typescript", "javascript", "sql", "nosql",
})

# Dropped when tokenizing a job description
JD_STOP_WORDS: frozenset[str] = frozenset({
    "and", "the", "a", "an", "in", "to", "of", "for", "with", "on", "at", "by",
    "is", "are", "was", "were", "be", "been", "this", "that", "it", "from", "as",
    "or", "but", "not", "if", "then", "else", "when", "where", "why", "how", "all",
    "any", "both", "each", "few", "more", "most", "other", "some", "such", "no",
    "nor", "too", "very", "can", "will", "just", "should", "now", "also", "well",
    "only", "may", "must", "would", "could", "our", "your", "their", "has", "have",
    "had", "do", "does", "did", "make", "made", "get", "got", "give", "gave",
})

# Counted as passive-voice markers by the tips generator
PASSIVE_INDICATORS: tuple[str, ...] = ("was", "were", "been", "being", "is", "are")

# ── Patterns ─────────────────────────────────────────────────────────────────

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"[\d()\-+\s]{10,}")

# Date format families
MONTH_YEAR_PATTERN = re.compile(r"[A-Za-z]{3,}\s+\d{4}")
SLASH_DATE_PATTERN = re.compile(r"\d+/\d+")
YEAR_ONLY_PATTERN = re.compile(r"^\d{4}$")

QUANTIFICATION_PATTERN = re.compile(
    r"\d+%|\d+\+|\$\d+|\d+x|\d+k|\d+m|\d+\s*(?:million|billion|thousand)",
    re.IGNORECASE,
)
# Narrower metric check used per experience entry by the tips generator
METRIC_PATTERN = re.compile(r"\d+%|\d+\+|\$\d+|\d+x|\d+k", re.IGNORECASE)

PASSIVE_VOICE_PATTERN = re.compile(r"\b(?:was|were|been|being)\s+\w+ed\b")
DIGIT_PATTERN = re.compile(r"\d")
JD_PUNCTUATION_PATTERN = re.compile(r"[^\w\s]", re.ASCII)

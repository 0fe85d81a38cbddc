"""
Text cleanup utilities for LLM answers.
"""

from __future__ import annotations

import re
import unicodedata

_NUMBERED_LINE = re.compile(r"^\s*\d+[.)](?!\d)\s*")


def normalize_text(text: str) -> str:
    """Normalize unicode punctuation, drop code fences, and collapse spaces."""
    text = unicodedata.normalize("NFKC", text)

    replacements = {
        "\u2019": "'",   # right single quote
        "\u2018": "'",   # left single quote
        "\u201c": '"',   # left double quote
        "\u201d": '"',   # right double quote
        "\u2013": "-",   # en-dash
        "\u2014": "-",   # em-dash
        "\u00a0": " ",   # non-breaking space
        "\u200b": "",    # zero-width space
        "\ufeff": "",    # BOM
    }
    for old, new in replacements.items():
        text = text.replace(old, new)

    # Models sometimes wrap plain answers in ``` fences
    text = re.sub(r"^```[a-zA-Z]*\s*|\s*```$", "", text.strip())
    text = re.sub(r"[ \t]+", " ", text)
    return text.strip()


def extract_bullet_prefix(text: str) -> str:
    """Remove common bullet prefixes (•, -, *, ●, ○, ▪) from the start of text."""
    return re.sub(r"^[\s]*[•\-\*●○▪►▸‣⁃]\s*", "", text)


def split_answer_lines(text: str) -> list[str]:
    """Split an LLM answer into non-empty lines with bullets and numbering removed."""
    lines = []
    for line in normalize_text(text).splitlines():
        line = _NUMBERED_LINE.sub("", extract_bullet_prefix(line)).strip()
        if line:
            lines.append(line)
    return lines


def parse_numbered_list(text: str) -> list[str]:
    """Return only the lines of text that start with "1.", "2." and so on."""
    items = []
    for line in normalize_text(text).splitlines():
        if re.match(r"^\s*\d+\.(?!\d)", line):
            item = re.sub(r"^\s*\d+\.\s*", "", line).strip()
            if item:
                items.append(item)
    return items

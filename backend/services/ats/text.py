"""Resume flattening, tokenization and small numeric helpers.

Regexes use ASCII word characters so token boundaries match the
browser-side scorer exactly.
"""

import math
import re

from models.schemas.resume_data import ResumeData

TOKEN_RE = re.compile(r"\b[\w\-+#.@]+\b", re.ASCII)
SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")


def _join(parts) -> str:
    return " ".join(p for p in parts if p)


def extract_full_text(resume: ResumeData) -> str:
    """Flatten a resume into one space-joined text blob.

    Section order is personal info, experience (one unit per entry),
    education, skills, projects. Sentence boundaries for readability come
    from this concatenation, so the order must not change.
    """
    sections: list[str] = []

    personal = _join(
        v for v in resume.personal_info.model_dump().values() if isinstance(v, str)
    )
    sections.append(personal)

    for exp in resume.experience:
        sections.append(_join([exp.position, exp.company, exp.description, *exp.achievements]))

    for edu in resume.education:
        sections.append(_join([edu.degree, edu.field, edu.institution]))

    for group in resume.skills:
        sections.append(_join(group.skills))

    for project in resume.projects:
        sections.append(_join([project.name, project.description, *project.technologies]))

    return " ".join(s for s in sections if s.strip())


def tokenize(text: str) -> list[str]:
    """Lower-cased tokens of word characters plus - + # . @"""
    if not text:
        return []
    return TOKEN_RE.findall(text.lower())


def split_sentences(text: str) -> list[str]:
    """Split on runs of . ! ? and drop blank fragments."""
    return [s for s in SENTENCE_SPLIT_RE.split(text) if s.strip()]


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like JavaScript's Math.round (halves go up, not to even)."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    return int(round_half_up(value))


def clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def variance(values: list[int]) -> float:
    """Population variance; 0 for an empty list."""
    if not values:
        return 0.0
    mean = sum(values) / len(values)
    return sum((v - mean) ** 2 for v in values) / len(values)

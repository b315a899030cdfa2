"""Raw resume features for the enhanced scorer."""

import re

from models.schemas.ats_evaluation import DetailedMetrics
from models.schemas.resume_data import ResumeData
from services.ats.keywords import (
    ALL_ACTION_VERBS,
    ALL_TECHNICAL_TERMS,
    PROFESSIONAL_LANGUAGE,
    get_industry_keywords,
)
from services.ats.text import round_half_up, round_int, split_sentences

QUANTIFICATION_RE = re.compile(
    r"\d+%|\$\d+|\d+\s*(?:customers|users|projects|revenue|growth|roi)",
    re.IGNORECASE,
)

# Number of quantified statements that earns a full quantification score
QUANTIFICATION_TARGET = 5

# Industry alignment when there is no industry keyword list to align with
NEUTRAL_ALIGNMENT = 50


def count_keyword_tokens(tokens: list[str], keywords: list[str]) -> int:
    """Tokens containing at least one keyword as a substring."""
    if not keywords:
        return 0
    return sum(1 for token in tokens if any(kw in token for kw in keywords))


def count_quantified_statements(text: str) -> int:
    return sum(1 for _ in QUANTIFICATION_RE.finditer(text))


def compute_section_completeness(resume: ResumeData) -> int:
    """Share (0-100) of the four core sections that are filled in."""
    info = resume.personal_info
    checks = (
        bool(info.full_name and info.email),
        bool(resume.experience),
        bool(resume.education),
        bool(resume.skills),
    )
    return round_int(sum(checks) / len(checks) * 100)


def calculate_detailed_metrics(
    text: str,
    tokens: list[str],
    resume: ResumeData,
    industry: str | None = None,
) -> DetailedMetrics:
    """Compute the eight raw features. All ratios guard a zero denominator."""
    word_count = len(tokens)
    sentences = split_sentences(text)
    industry_keywords = get_industry_keywords(industry)

    keyword_hits = count_keyword_tokens(tokens, industry_keywords)
    keyword_density = keyword_hits / word_count * 100 if word_count else 0.0

    verb_hits = sum(1 for token in tokens if token in ALL_ACTION_VERBS)
    action_verb_usage = verb_hits / len(sentences) * 100 if sentences else 0.0

    quantified = count_quantified_statements(text)
    quantification_score = min(100.0, quantified / QUANTIFICATION_TARGET * 100)

    professional_hits = sum(1 for token in tokens if token in PROFESSIONAL_LANGUAGE)
    professional_language = professional_hits / word_count * 1000 if word_count else 0.0

    technical_hits = sum(1 for token in tokens if token in ALL_TECHNICAL_TERMS)
    technical_terms = technical_hits / word_count * 1000 if word_count else 0.0

    if industry_keywords:
        industry_alignment = min(100.0, keyword_hits / len(industry_keywords) * 100)
    else:
        industry_alignment = NEUTRAL_ALIGNMENT

    return DetailedMetrics(
        word_count=word_count,
        keyword_density=round_half_up(keyword_density, 2),
        action_verb_usage=round_half_up(action_verb_usage, 2),
        quantification_score=round_int(quantification_score),
        section_completeness=compute_section_completeness(resume),
        professional_language=round_half_up(professional_language, 2),
        technical_terms=round_half_up(technical_terms, 2),
        industry_alignment=round_int(industry_alignment),
    )

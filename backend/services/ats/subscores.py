"""Seven bounded sub-scores and their weighted aggregate.

Thresholds are step functions, not curves. Each sub-score is clamped to
its maximum and rounded half-up to an integer.
"""

import re

from models.schemas.ats_evaluation import DetailedMetrics, EnhancedBreakdown
from models.schemas.resume_data import ResumeData
from services.ats.keywords import ACHIEVEMENT_VERBS, MODERN_TECH_TERMS, normalize_option
from services.ats.text import clamp, round_int, split_sentences, variance

MAX_STRUCTURE = 50
MAX_CONTENT = 50
MAX_KEYWORDS = 35
MAX_FORMATTING = 30
MAX_READABILITY = 45
MAX_IMPACT = 100
MAX_MODERNIZATION = 75

# Weights sum to 1.0. Sub-scores sit on different scales, so the result is
# a scale-mixed heuristic rather than a normalized percentage.
WEIGHTS: dict[str, float] = {
    "structure": 0.15,
    "content": 0.20,
    "keywords": 0.25,
    "formatting": 0.10,
    "readability": 0.15,
    "impact": 0.10,
    "modernization": 0.05,
}

SPECIAL_CHAR_RE = re.compile(r"""[^\w\s.,;:'"()\-+#@%]""", re.ASCII)
EXCESSIVE_WHITESPACE_RE = re.compile(r"\s{4,}")
MAX_SPECIAL_CHARS = 20
MAX_PARAGRAPH_CHARS = 500
READABILITY_BASE = 20


def score_structure(resume: ResumeData) -> int:
    info = resume.personal_info
    score = 0
    if info.full_name:
        score += 5
    if info.email:
        score += 5
    if info.summary:
        score += 5
    if resume.experience:
        score += 10
    if resume.education:
        score += 10
    if resume.skills:
        score += 10
    if resume.projects:
        score += 5
    return min(score, MAX_STRUCTURE)


def score_content(metrics: DetailedMetrics, industry: str | None = None) -> int:
    score = 0.0

    wc = metrics.word_count
    if 400 <= wc <= 600:
        score += 15
    elif 300 <= wc <= 800:
        score += 10
    elif wc >= 200:
        score += 5

    if metrics.professional_language >= 5:
        score += 15
    elif metrics.professional_language >= 3:
        score += 10
    elif metrics.professional_language >= 1:
        score += 5

    if normalize_option(industry) == "technology" and metrics.technical_terms >= 10:
        score += 10
    elif metrics.technical_terms >= 5:
        score += 5

    score += metrics.industry_alignment * 0.1
    return round_int(min(score, MAX_CONTENT))


def score_keywords(metrics: DetailedMetrics) -> int:
    score = 0

    density = metrics.keyword_density
    if 2 <= density <= 5:
        score += 20
    elif 1 <= density <= 8:
        score += 15
    elif density >= 0.5:
        score += 10

    usage = metrics.action_verb_usage
    if usage >= 60:
        score += 15
    elif usage >= 40:
        score += 10
    elif usage >= 20:
        score += 5

    return min(score, MAX_KEYWORDS)


def score_formatting(text: str) -> int:
    """Start at 30 and deduct for layouts ATS parsers choke on."""
    score = MAX_FORMATTING

    if "|" in text or "\t" in text:
        score -= 10
    if len(SPECIAL_CHAR_RE.findall(text)) > MAX_SPECIAL_CHARS:
        score -= 10
    if EXCESSIVE_WHITESPACE_RE.search(text):
        score -= 5
    if any(len(p) > MAX_PARAGRAPH_CHARS for p in text.split("\n\n")):
        score -= 5

    return max(score, 0)


def score_readability(text: str, tokens: list[str]) -> int:
    score = READABILITY_BASE
    sentences = split_sentences(text)
    avg_length = len(tokens) / len(sentences) if sentences else 0.0

    if 10 <= avg_length <= 20:
        score += 15
    elif 8 <= avg_length <= 25:
        score += 10
    elif 6 <= avg_length <= 30:
        score += 5

    spread = variance([len(s.split()) for s in sentences])
    if spread > 10:
        score += 10
    elif spread > 5:
        score += 5

    return min(score, MAX_READABILITY)


def score_impact(metrics: DetailedMetrics, text: str) -> int:
    lower = text.lower()
    achievement_hits = sum(1 for verb in ACHIEVEMENT_VERBS if verb in lower)
    score = (
        metrics.quantification_score * 0.4
        + metrics.action_verb_usage / 100 * 30
        + min(30, 5 * achievement_hits)
    )
    return round_int(min(score, MAX_IMPACT))


def score_modernization(resume: ResumeData, text: str, industry: str | None = None) -> int:
    lower = text.lower()
    info = resume.personal_info
    modern_hits = sum(1 for term in MODERN_TECH_TERMS if term in lower)

    score = min(30, 10 * modern_hits)
    if info.linkedin:
        score += 20
    if info.github and normalize_option(industry) == "technology":
        score += 15
    if info.website:
        score += 10
    if resume.certifications:
        score += 15
    return min(score, MAX_MODERNIZATION)


def calculate_breakdown(
    resume: ResumeData,
    text: str,
    tokens: list[str],
    metrics: DetailedMetrics,
    industry: str | None = None,
) -> EnhancedBreakdown:
    return EnhancedBreakdown(
        structure=score_structure(resume),
        content=score_content(metrics, industry),
        keywords=score_keywords(metrics),
        formatting=score_formatting(text),
        readability=score_readability(text, tokens),
        impact=score_impact(metrics, text),
        modernization=score_modernization(resume, text, industry),
    )


def calculate_overall_score(breakdown: EnhancedBreakdown) -> int:
    """Weighted sum of the seven sub-scores, rounded and clamped to 0-100."""
    parts = breakdown.model_dump()
    weighted = sum(parts[name] * weight for name, weight in WEIGHTS.items())
    return int(clamp(round_int(weighted), 0, 100))

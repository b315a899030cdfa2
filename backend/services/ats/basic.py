"""Basic ATS scorer used by the live feedback panel.

Four 0-100 sub-scores (structure, keywords, readability, impact) built from
simple counts. Shares no tables or thresholds with the enhanced scorer.
"""

import logging
import re

from models.schemas.ats_evaluation import (
    BasicAtsEvaluation,
    BasicBreakdown,
    BasicMetrics,
    BasicResumeScore,
    Recommendations,
)
from models.schemas.resume_data import ResumeData, coerce_resume
from services.ats.basic_keywords import (
    ALL_ACTION_VERBS,
    SOFT_SKILLS,
    TECH_WORDS,
    count_impact_statements,
    get_keywords_for_industry,
    get_keywords_for_role,
    normalize_keyword,
)
from services.ats.keywords import normalize_option
from services.ats.text import clamp, round_int

logger = logging.getLogger(__name__)

EXPECTED_SECTIONS = ("contact", "summary", "experience", "education", "skills")

WEIGHTS: dict[str, float] = {
    "structure": 0.30,
    "keywords": 0.40,
    "readability": 0.15,
    "impact": 0.15,
}

COMPLETENESS_WEIGHTS: dict[str, int] = {
    "name": 10,
    "email": 10,
    "phone": 5,
    "summary": 10,
    "experience": 25,
    "education": 15,
    "skills": 15,
    "projects": 5,
    "certifications": 5,
}

MAX_MISSING_KEYWORDS = 10
MAX_STRENGTHS = 5
MAX_SUGGESTIONS = 5

_NON_TOKEN_RE = re.compile(r"[^a-z0-9\s.-]")
_SENTENCE_RE = re.compile(r"[.!?]+")
_VOWEL_RE = re.compile(r"[aeiouy]", re.IGNORECASE)
_DIGIT_RE = re.compile(r"\d")


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

def extract_resume_text(resume: ResumeData) -> str:
    info = resume.personal_info
    parts: list[str] = [info.full_name, info.summary]

    for exp in resume.experience:
        parts.extend([exp.company, exp.position, exp.description, *exp.achievements])
    for edu in resume.education:
        parts.extend([edu.institution, edu.degree, edu.field])
    for group in resume.skills:
        parts.extend(group.skills)
    for project in resume.projects:
        parts.extend([project.name, project.description, *project.technologies])
    for cert in resume.certifications:
        parts.extend([cert.name, cert.issuer])

    return " ".join(p for p in parts if p)


def tokenize(text: str) -> list[str]:
    cleaned = _NON_TOKEN_RE.sub(" ", text.lower())
    return [w for w in cleaned.split() if len(w) > 1]


def split_sentences(text: str) -> list[str]:
    return [s for s in _SENTENCE_RE.split(text) if len(s.strip()) > 5]


# ---------------------------------------------------------------------------
# Metrics
# ---------------------------------------------------------------------------

def has_section(resume: ResumeData, section: str) -> bool:
    info = resume.personal_info
    if section == "contact":
        return bool(info.email or info.phone)
    if section == "summary":
        return len(info.summary) > 30
    if section == "experience":
        return bool(resume.experience)
    if section == "education":
        return bool(resume.education)
    if section == "skills":
        return any(group.skills for group in resume.skills)
    return False


def count_quantified_achievements(resume: ResumeData) -> int:
    return sum(
        1
        for exp in resume.experience
        for achievement in exp.achievements
        if _DIGIT_RE.search(achievement)
    )


def keyword_density(words: list[str]) -> int:
    """Unique-word ratio as a percentage."""
    if not words:
        return 0
    return round_int(len(set(words)) / len(words) * 100)


def readability_grade(sentences: list[str], words: list[str]) -> int:
    """Flesch-Kincaid grade with vowel groups as a syllable estimate, 0-20."""
    if not sentences or not words:
        return 0
    avg_words = len(words) / len(sentences)
    syllables = sum(max(1, len(_VOWEL_RE.findall(w))) for w in words)
    grade = 0.39 * avg_words + 11.8 * (syllables / len(words)) - 15.59
    return int(clamp(round_int(grade), 0, 20))


def calculate_basic_metrics(resume: ResumeData, text: str, words: list[str]) -> BasicMetrics:
    lower = text.lower()
    sentences = split_sentences(text)

    # Distinct verbs, so a verb listed under two categories counts once
    action_verbs = {verb for verb in ALL_ACTION_VERBS if verb in lower}
    found = [s for s in EXPECTED_SECTIONS if has_section(resume, s)]

    return BasicMetrics(
        word_count=len(words),
        sentence_count=len(sentences),
        avg_words_per_sentence=round_int(len(words) / len(sentences)) if sentences else 0,
        action_verb_count=len(action_verbs),
        technical_keyword_count=sum(1 for w in words if w in TECH_WORDS),
        soft_skill_count=sum(1 for skill in SOFT_SKILLS if skill in lower),
        impact_statement_count=count_impact_statements(text),
        quantified_achievements=count_quantified_achievements(resume),
        sections_found=found,
        sections_missing=[s for s in EXPECTED_SECTIONS if s not in found],
        keyword_density=keyword_density(words),
        readability_grade=readability_grade(sentences, words),
    )


# ---------------------------------------------------------------------------
# Sub-scores
# ---------------------------------------------------------------------------

def score_structure(metrics: BasicMetrics) -> int:
    bonuses = {"contact": 10, "experience": 15, "education": 10, "skills": 10, "summary": 5}
    score = 50 + sum(bonuses[s] for s in metrics.sections_found)
    return min(100, score)


def score_keywords(metrics: BasicMetrics, lower_text: str, target_role: str | None) -> int:
    score = 40
    if metrics.technical_keyword_count >= 5:
        score += 15
    if metrics.technical_keyword_count >= 10:
        score += 15
    if metrics.soft_skill_count >= 3:
        score += 10
    if metrics.soft_skill_count >= 6:
        score += 10
    if target_role:
        matches = sum(1 for kw in get_keywords_for_role(target_role) if kw in lower_text)
        score += min(10, matches * 2)
    return min(100, score)


def score_readability(metrics: BasicMetrics) -> int:
    score = 60
    if 12 <= metrics.avg_words_per_sentence <= 25:
        score += 20
    if 30 <= metrics.keyword_density <= 70:
        score += 20
    return min(100, score)


def score_impact(metrics: BasicMetrics) -> int:
    score = 30
    if metrics.quantified_achievements >= 3:
        score += 25
    if metrics.quantified_achievements >= 6:
        score += 25
    if metrics.impact_statement_count >= 2:
        score += 10
    if metrics.impact_statement_count >= 5:
        score += 10
    return min(100, score)


# ---------------------------------------------------------------------------
# Keywords and observations
# ---------------------------------------------------------------------------

def get_target_keywords(target_role: str | None, industry: str | None) -> list[str]:
    keywords: list[str] = []
    if target_role:
        keywords.extend(get_keywords_for_role(target_role))
    if industry:
        keywords.extend(get_keywords_for_industry(industry))
    if not keywords:
        keywords.extend(SOFT_SKILLS[:10])
        keywords.extend(ALL_ACTION_VERBS[:20])
    return list(dict.fromkeys(keywords))


def analyze_keywords(text: str, keywords: list[str]) -> tuple[list[str], list[str]]:
    lower = text.lower()
    matched: list[str] = []
    missing: list[str] = []
    for keyword in keywords:
        if normalize_keyword(keyword) in lower:
            matched.append(keyword)
        else:
            missing.append(keyword)
    return matched, missing[:MAX_MISSING_KEYWORDS]


def generate_strengths(resume: ResumeData, metrics: BasicMetrics, breakdown: BasicBreakdown) -> list[str]:
    strengths: list[str] = []
    if breakdown.structure >= 80:
        strengths.append("Well-structured resume with all key sections")
    if breakdown.keywords >= 80:
        strengths.append("Strong keyword optimization")
    if breakdown.impact >= 70:
        strengths.append("Good use of quantified achievements")
    if metrics.action_verb_count >= 10:
        strengths.append("Effective use of action verbs")
    if len(resume.experience) >= 3:
        strengths.append("Solid work experience history")
    return strengths[:MAX_STRENGTHS]


def generate_critical_issues(resume: ResumeData, metrics: BasicMetrics, breakdown: BasicBreakdown) -> list[str]:
    info = resume.personal_info
    issues: list[str] = []
    if breakdown.structure < 50:
        issues.append("Missing essential resume sections")
    if not info.email:
        issues.append("No email address provided")
    if not info.phone:
        issues.append("No phone number provided")
    if not resume.experience:
        issues.append("No work experience listed")
    if metrics.word_count < 150:
        issues.append("Resume content is too sparse")
    return issues


def generate_improvements(resume: ResumeData, metrics: BasicMetrics, breakdown: BasicBreakdown) -> list[str]:
    improvements: list[str] = []
    if breakdown.impact < 60:
        improvements.append("Add more quantified achievements (numbers, percentages, dollar amounts)")
    if breakdown.keywords < 60:
        improvements.append("Include more industry-relevant keywords")
    if metrics.action_verb_count < 8:
        improvements.append("Start bullet points with strong action verbs")
    if not resume.personal_info.summary:
        improvements.append("Add a professional summary at the top")
    if not resume.skills:
        improvements.append("Add a dedicated skills section")
    return improvements


def calculate_completeness(resume: ResumeData) -> int:
    info = resume.personal_info
    present = {
        "name": bool(info.full_name),
        "email": bool(info.email),
        "phone": bool(info.phone),
        "summary": len(info.summary) > 50,
        "experience": bool(resume.experience),
        "education": bool(resume.education),
        "skills": bool(resume.skills),
        "projects": bool(resume.projects),
        "certifications": bool(resume.certifications),
    }
    score = sum(COMPLETENESS_WEIGHTS[name] for name, ok in present.items() if ok)
    return min(100, score)


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

def calculate_ats_score(
    resume: ResumeData | dict,
    target_role: str | None = None,
    industry: str | None = None,
) -> BasicAtsEvaluation:
    resume = coerce_resume(resume)
    target_role = normalize_option(target_role)
    industry = normalize_option(industry)

    text = extract_resume_text(resume)
    words = tokenize(text)
    metrics = calculate_basic_metrics(resume, text, words)

    breakdown = BasicBreakdown(
        structure=score_structure(metrics),
        keywords=score_keywords(metrics, text.lower(), target_role),
        readability=score_readability(metrics),
        impact=score_impact(metrics),
    )
    parts = breakdown.model_dump()
    score = round_int(sum(parts[name] * weight for name, weight in WEIGHTS.items()))

    matched, missing = analyze_keywords(text, get_target_keywords(target_role, industry))
    issues = generate_critical_issues(resume, metrics, breakdown)
    improvements = generate_improvements(resume, metrics, breakdown)

    logger.debug("Basic ATS score %d (role=%s, words=%d)", score, target_role, metrics.word_count)

    return BasicAtsEvaluation(
        score=score,
        breakdown=breakdown,
        detailed_metrics=metrics,
        matched_keywords=matched,
        missing_keywords=missing,
        strengths=generate_strengths(resume, metrics, breakdown),
        critical_issues=issues,
        improvements=improvements,
        recommendations=Recommendations(
            high=issues[:3],
            medium=improvements[:3],
            low=improvements[3:6],
        ),
    )


def calculate_resume_score(
    resume: ResumeData | dict,
    target_role: str | None = None,
    industry: str | None = None,
) -> BasicResumeScore:
    resume = coerce_resume(resume)
    evaluation = calculate_ats_score(resume, target_role, industry)
    return BasicResumeScore(
        overall=evaluation.score,
        completeness=calculate_completeness(resume),
        ats=evaluation.score,
        impact=evaluation.breakdown.impact,
        suggestions=evaluation.recommendations.high[:MAX_SUGGESTIONS],
        breakdown=evaluation.breakdown,
        detailed_metrics=evaluation.detailed_metrics,
        strengths=evaluation.strengths,
        critical_issues=evaluation.critical_issues,
        recommendations=evaluation.recommendations,
    )

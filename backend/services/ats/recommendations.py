"""Keyword matching, content observations and prioritized recommendations.

Template-based rules engine: every message is emitted by a fixed
if-then rule over the resume, metrics and sub-scores.
"""

from models.schemas.ats_evaluation import (
    ContentAnalysis,
    DetailedMetrics,
    EnhancedBreakdown,
    KeywordAnalysis,
    Recommendations,
)
from models.schemas.resume_data import ResumeData
from services.ats.keywords import get_industry_keywords, normalize_option

# Critical issues
MSG_MISSING_CONTACT = "Missing essential contact info - Name and email are required for all resumes"
MSG_MISSING_SUMMARY = "Missing professional summary - Add 2-4 impactful sentences highlighting your key value proposition"
MSG_NO_EXPERIENCE = "No work experience listed - Add relevant positions with detailed achievements"
MSG_NO_SKILLS = "No skills section - Add relevant skills grouped by category"
MSG_FEW_ACTION_VERBS = "Very few action verbs - Start each bullet point with a strong action verb (e.g., Led, Developed, Achieved)"
MSG_NO_QUANTIFICATION = "No quantifiable achievements - Add specific numbers, percentages, and metrics to demonstrate impact"

# Score-driven recommendations
MSG_STRUCTURE = "Improve resume structure - Add all standard sections: Summary, Experience, Education, Skills"
MSG_FORMATTING = "Fix formatting issues - Use simple formatting, avoid tables and special characters for ATS compatibility"
MSG_KEYWORDS = "Enhance keyword optimization - Research job descriptions and incorporate relevant industry terms"
MSG_CONTENT = "Strengthen content quality - Add more professional language and detailed descriptions"
MSG_READABILITY = "Improve readability - Use concise sentences of 10-20 words and vary their length"
MSG_MODERNIZATION = "Update with modern terminology and technologies relevant to your field"


def analyze_keywords(text: str, target_keywords: list[str]) -> KeywordAnalysis:
    """Split target keywords by case-insensitive presence in the text."""
    lower = text.lower()
    matched: list[str] = []
    missing: list[str] = []
    for keyword in target_keywords:
        if keyword.lower() in lower:
            matched.append(keyword)
        else:
            missing.append(keyword)
    return KeywordAnalysis(matched=matched, missing=missing)


def analyze_content(
    resume: ResumeData,
    metrics: DetailedMetrics,
    industry: str | None = None,
) -> ContentAnalysis:
    info = resume.personal_info
    industry = normalize_option(industry)
    has_industry_keywords = bool(get_industry_keywords(industry))

    strengths: list[str] = []
    if metrics.action_verb_usage >= 50:
        strengths.append("Strong use of action verbs to describe achievements")
    if metrics.quantification_score >= 60:
        strengths.append("Quantifiable achievements backed by specific metrics")
    if metrics.professional_language >= 5:
        strengths.append("Good use of professional language")
    if metrics.section_completeness == 100:
        strengths.append("Comprehensive resume with all key sections complete")
    if has_industry_keywords and metrics.industry_alignment >= 70:
        strengths.append("Strong alignment with industry-specific keywords")
    if industry == "technology" and metrics.technical_terms >= 10:
        strengths.append("Rich technical vocabulary demonstrating domain expertise")

    critical: list[str] = []
    if not info.full_name or not info.email:
        critical.append(MSG_MISSING_CONTACT)
    if not info.summary:
        critical.append(MSG_MISSING_SUMMARY)
    if not resume.experience:
        critical.append(MSG_NO_EXPERIENCE)
    if not resume.skills:
        critical.append(MSG_NO_SKILLS)
    if metrics.action_verb_usage < 20:
        critical.append(MSG_FEW_ACTION_VERBS)
    if metrics.quantification_score == 0:
        critical.append(MSG_NO_QUANTIFICATION)

    improvements: list[str] = []
    if metrics.word_count < 300:
        improvements.append("Resume is too brief - Expand descriptions to provide more context (aim for 400-600 words)")
    elif metrics.word_count > 800:
        improvements.append("Resume may be too long - Consider condensing to highlight the most impactful achievements")
    if has_industry_keywords and metrics.keyword_density < 1:
        improvements.append("Low keyword density - Incorporate more industry-specific keywords naturally into descriptions")
    elif metrics.keyword_density > 8:
        improvements.append("Possible keyword stuffing - Ensure keywords are used naturally and in context")
    if 20 <= metrics.action_verb_usage < 50:
        improvements.append("Moderate action verb usage - Increase the variety and frequency of strong action verbs")
    if 0 < metrics.quantification_score < 60:
        improvements.append("Limited quantification - Add more specific metrics (%, $, numbers) to achievements")

    enhancements: list[str] = []
    if not info.linkedin:
        enhancements.append("Consider adding your LinkedIn profile URL")
    if industry == "technology" and not info.github:
        enhancements.append("Consider adding a GitHub profile for technical credibility")
    if not resume.certifications:
        enhancements.append("Consider adding relevant certifications to boost credibility")

    return ContentAnalysis(
        strengths=strengths,
        critical_issues=critical,
        improvements=improvements,
        enhancements=enhancements,
    )


def _dedupe(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))


def generate_recommendations(
    breakdown: EnhancedBreakdown,
    content: ContentAnalysis,
) -> Recommendations:
    """Bucket suggestions by priority; critical issues lead the high bucket."""
    high = list(content.critical_issues)
    if breakdown.structure < 30:
        high.append(MSG_STRUCTURE)
    if breakdown.formatting < 20:
        high.append(MSG_FORMATTING)

    medium = list(content.improvements)
    if breakdown.keywords < 20 and not any("keyword" in m.lower() for m in medium):
        medium.append(MSG_KEYWORDS)
    if breakdown.content < 25:
        medium.append(MSG_CONTENT)
    if breakdown.readability < 30:
        medium.append(MSG_READABILITY)

    low = list(content.enhancements)
    if breakdown.modernization < 30:
        low.append(MSG_MODERNIZATION)

    return Recommendations(high=_dedupe(high), medium=_dedupe(medium), low=_dedupe(low))

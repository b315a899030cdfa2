"""ATS scorer outputs.

Two independent families: the enhanced seven-part evaluation and the basic
four-part evaluation, consumed by different views.
"""

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Enhanced scorer
# ---------------------------------------------------------------------------

class EnhancedBreakdown(BaseModel):
    """Seven bounded sub-scores (maxima in comments)."""
    structure: int = 0  # 50
    content: int = 0  # 50
    keywords: int = 0  # 35
    formatting: int = 0  # 30
    readability: int = 0  # 45
    impact: int = 0  # 100
    modernization: int = 0  # 75


class DetailedMetrics(BaseModel):
    word_count: int = 0
    keyword_density: float = 0.0  # % of tokens hitting an industry keyword
    action_verb_usage: float = 0.0  # action verbs per sentence x100
    quantification_score: int = 0  # 0-100
    section_completeness: int = 0  # 0-100
    professional_language: float = 0.0  # per 1000 tokens
    technical_terms: float = 0.0  # per 1000 tokens
    industry_alignment: int = 50  # 0-100, 50 = neutral


class Recommendations(BaseModel):
    high: list[str] = []
    medium: list[str] = []
    low: list[str] = []


class KeywordAnalysis(BaseModel):
    matched: list[str] = []
    missing: list[str] = []


class ContentAnalysis(BaseModel):
    """Rule-based observations; improvements are significant, enhancements are polish."""
    strengths: list[str] = []
    critical_issues: list[str] = []
    improvements: list[str] = []
    enhancements: list[str] = []


class EnhancedAtsEvaluation(BaseModel):
    score: int = 0
    breakdown: EnhancedBreakdown = EnhancedBreakdown()
    detailed_metrics: DetailedMetrics = DetailedMetrics()
    matched_keywords: list[str] = []
    missing_keywords: list[str] = []
    strengths: list[str] = []
    critical_issues: list[str] = []
    improvements: list[str] = []
    recommendations: Recommendations = Recommendations()


class EnhancedResumeScore(BaseModel):
    """Flattened enhanced result as shown on the CV analysis dashboard."""
    overall: int = 0
    completeness: int = 0
    ats: int = 0
    impact: int = 0
    suggestions: list[str] = []
    breakdown: EnhancedBreakdown = EnhancedBreakdown()
    detailed_metrics: DetailedMetrics = DetailedMetrics()
    strengths: list[str] = []
    critical_issues: list[str] = []
    recommendations: Recommendations = Recommendations()


class QuickCheckResult(BaseModel):
    score: int = 0
    status: str = "poor"  # excellent, good, needs-work, poor
    top_issue: str | None = None


# ---------------------------------------------------------------------------
# Basic scorer
# ---------------------------------------------------------------------------

class BasicBreakdown(BaseModel):
    """Four sub-scores, each 0-100."""
    structure: int = 0
    keywords: int = 0
    impact: int = 0
    readability: int = 0


class BasicMetrics(BaseModel):
    word_count: int = 0
    sentence_count: int = 0
    avg_words_per_sentence: int = 0
    action_verb_count: int = 0
    technical_keyword_count: int = 0
    soft_skill_count: int = 0
    impact_statement_count: int = 0
    quantified_achievements: int = 0
    sections_found: list[str] = []
    sections_missing: list[str] = []
    keyword_density: int = 0  # unique-token ratio, %
    readability_grade: int = 0  # Flesch-Kincaid grade, 0-20


class BasicAtsEvaluation(BaseModel):
    score: int = 0
    breakdown: BasicBreakdown = BasicBreakdown()
    detailed_metrics: BasicMetrics = BasicMetrics()
    matched_keywords: list[str] = []
    missing_keywords: list[str] = []
    strengths: list[str] = []
    critical_issues: list[str] = []
    improvements: list[str] = []
    recommendations: Recommendations = Recommendations()


class BasicResumeScore(BaseModel):
    """Flattened basic result as consumed by the live feedback panel."""
    overall: int = 0
    completeness: int = 0
    ats: int = 0
    impact: int = 0
    suggestions: list[str] = []
    breakdown: BasicBreakdown = BasicBreakdown()
    detailed_metrics: BasicMetrics = BasicMetrics()
    strengths: list[str] = []
    critical_issues: list[str] = []
    recommendations: Recommendations = Recommendations()


class FeedbackItem(BaseModel):
    """A single live-feedback entry."""
    id: str
    type: str  # error, warning, info, success
    message: str
    impact: str  # high, medium, low
    field: str | None = None
    suggestion: str = ""


# ---------------------------------------------------------------------------
# Plain-text compatibility check
# ---------------------------------------------------------------------------

class TextAtsBreakdown(BaseModel):
    structure: float = 0  # 25
    contact: float = 0  # 20
    keywords: float = 0  # 25
    formatting: float = 0  # 15
    readability: float = 0  # 10
    extras: float = 0  # 15


class TextAtsEvaluation(BaseModel):
    score: int = 0
    breakdown: TextAtsBreakdown = TextAtsBreakdown()
    matched_keywords: list[str] = []
    missing_keywords: list[str] = []
    keyword_density: float = 0.0
    missing_sections: list[str] = []
    issues: list[str] = []
    suggestions: list[str] = []


# ---------------------------------------------------------------------------
# Parsing issue check
# ---------------------------------------------------------------------------

class AtsIssue(BaseModel):
    """A detected parsing hazard."""
    type: str  # formatting, parsing, structure, content, compatibility
    severity: str  # critical, major, minor, info
    title: str
    description: str = ""
    recommendation: str = ""


class FileTypeCompatibility(BaseModel):
    compatible: bool = False
    warnings: list[str] = []
    recommendation: str = ""


class AtsCheckSummary(BaseModel):
    critical_count: int = 0
    major_count: int = 0
    passes_basic_parsing: bool = False  # no critical issues
    ready_for_submission: bool = False  # score >= 70 and no critical issues


class FullAtsCheck(BaseModel):
    overall_score: int = 0
    issues: list[AtsIssue] = []
    file_compatibility: FileTypeCompatibility = FileTypeCompatibility()
    summary: AtsCheckSummary = AtsCheckSummary()

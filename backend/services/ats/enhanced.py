"""Enhanced ATS scorer: seven weighted sub-scores plus recommendations.

Pipeline (single pass, synchronous, no I/O):
1. Flatten the resume into text and tokens
2. Compute raw metrics
3. Map metrics to bounded sub-scores and a weighted overall score
4. Match target keywords and derive content observations
5. Bucket recommendations by priority
"""

import logging

from models.schemas.ats_evaluation import (
    EnhancedAtsEvaluation,
    EnhancedResumeScore,
    QuickCheckResult,
)
from models.schemas.resume_data import ResumeData, coerce_resume
from services.ats.keywords import get_target_keywords, normalize_option
from services.ats.metrics import calculate_detailed_metrics
from services.ats.recommendations import (
    analyze_content,
    analyze_keywords,
    generate_recommendations,
)
from services.ats.subscores import calculate_breakdown, calculate_overall_score
from services.ats.text import extract_full_text, round_int, tokenize

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 8


class EnhancedAtsScorer:
    """Scores one resume against optional role/industry targets.

    The resume is only read. Every call to ``calculate_score`` builds a new
    evaluation, so repeated calls return equal results.
    """

    def __init__(
        self,
        resume: ResumeData | dict,
        target_role: str | None = None,
        industry: str | None = None,
    ) -> None:
        self.resume = coerce_resume(resume)
        self.target_role = normalize_option(target_role)
        self.industry = normalize_option(industry)

    def calculate_score(self) -> EnhancedAtsEvaluation:
        text = extract_full_text(self.resume)
        tokens = tokenize(text)

        metrics = calculate_detailed_metrics(text, tokens, self.resume, self.industry)
        breakdown = calculate_breakdown(self.resume, text, tokens, metrics, self.industry)
        overall = calculate_overall_score(breakdown)

        keywords = analyze_keywords(text, get_target_keywords(self.target_role, self.industry))
        content = analyze_content(self.resume, metrics, self.industry)
        recommendations = generate_recommendations(breakdown, content)

        logger.debug(
            "Enhanced ATS score %d (role=%s, industry=%s, words=%d)",
            overall, self.target_role, self.industry, metrics.word_count,
        )

        return EnhancedAtsEvaluation(
            score=overall,
            breakdown=breakdown,
            detailed_metrics=metrics,
            matched_keywords=keywords.matched,
            missing_keywords=keywords.missing,
            strengths=content.strengths,
            critical_issues=content.critical_issues,
            improvements=content.improvements + content.enhancements,
            recommendations=recommendations,
        )


def calculate_enhanced_ats_score(
    resume: ResumeData | dict,
    target_role: str | None = None,
    industry: str | None = None,
) -> EnhancedResumeScore:
    """Score a resume and flatten the evaluation for the dashboard."""
    evaluation = EnhancedAtsScorer(resume, target_role, industry).calculate_score()
    bd = evaluation.breakdown
    metrics = evaluation.detailed_metrics
    recs = evaluation.recommendations

    # UI-only composite of the parse-related sub-scores, distinct from overall
    ats = round_int((bd.structure + bd.keywords + bd.formatting + bd.readability) / 4)
    completeness = round_int(
        metrics.section_completeness * 0.6 + min(metrics.word_count / 5, 40)
    )
    impact = round_int(bd.impact * 0.5 + bd.content * 0.3 + bd.modernization * 0.2)
    suggestions = (recs.high + recs.medium + recs.low)[:MAX_SUGGESTIONS]

    return EnhancedResumeScore(
        overall=evaluation.score,
        completeness=min(completeness, 100),
        ats=ats,
        impact=impact,
        suggestions=suggestions,
        breakdown=bd,
        detailed_metrics=metrics,
        strengths=evaluation.strengths,
        critical_issues=evaluation.critical_issues,
        recommendations=recs,
    )


def quick_ats_check(resume: ResumeData | dict) -> QuickCheckResult:
    """Untargeted score with a status band and the single most pressing issue."""
    evaluation = EnhancedAtsScorer(resume).calculate_score()
    score = evaluation.score

    if score >= 80:
        status = "excellent"
    elif score >= 60:
        status = "good"
    elif score >= 40:
        status = "needs-work"
    else:
        status = "poor"

    recs = evaluation.recommendations
    top_issue = (recs.high or recs.medium or [None])[0]
    return QuickCheckResult(score=score, status=status, top_issue=top_issue)

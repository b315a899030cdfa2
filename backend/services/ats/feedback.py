"""Live feedback items derived from a basic resume score."""

import logging

from models.schemas.ats_evaluation import BasicResumeScore, FeedbackItem
from models.schemas.resume_data import ResumeData, coerce_resume

logger = logging.getLogger(__name__)

IMPACT_ORDER = {"high": 3, "medium": 2, "low": 1}


def generate_feedback(score: BasicResumeScore, resume: ResumeData | dict) -> list[FeedbackItem]:
    """Turn a score into UI feedback items, most impactful first.

    The sort is stable, so items of equal impact keep their emission order.
    """
    resume = coerce_resume(resume)
    items: list[FeedbackItem] = []

    for i, issue in enumerate(score.critical_issues):
        items.append(FeedbackItem(
            id=f"critical-{i}",
            type="error",
            message=issue,
            impact="high",
            suggestion="Address this issue immediately to improve ATS performance",
        ))

    for i, strength in enumerate(score.strengths):
        items.append(FeedbackItem(
            id=f"strength-{i}",
            type="success",
            message=strength,
            impact="low",
            suggestion="Great job! Keep this element in your resume",
        ))

    metrics = score.detailed_metrics
    if metrics.keyword_density < 30:
        items.append(FeedbackItem(
            id="keywords-low",
            type="warning",
            message="Low keyword diversity detected",
            impact="high",
            field="skills",
            suggestion="Add more industry-specific keywords relevant to your target role",
        ))
    elif metrics.keyword_density > 80:
        items.append(FeedbackItem(
            id="keywords-high",
            type="info",
            message="High keyword density - ensure keywords are used naturally",
            impact="medium",
            suggestion="Review keyword placement to avoid keyword stuffing",
        ))

    if metrics.action_verb_count < 5:
        items.append(FeedbackItem(
            id="action-verbs-low",
            type="warning",
            message="Low action verb usage",
            impact="high",
            field="experience",
            suggestion='Start bullet points with strong action verbs like "Led", "Developed", "Achieved"',
        ))

    if metrics.quantified_achievements < 3:
        items.append(FeedbackItem(
            id="metrics-low",
            type="warning",
            message="Limited quantifiable achievements",
            impact="high",
            field="experience",
            suggestion='Add specific metrics like "Increased sales by 25%" or "Managed team of 5"',
        ))

    if not resume.personal_info.summary:
        items.append(FeedbackItem(
            id="summary-missing",
            type="error",
            message="Professional summary is missing",
            impact="high",
            field="personal_info.summary",
            suggestion="Add a 2-3 sentence summary highlighting your key qualifications and value",
        ))

    if not resume.experience:
        items.append(FeedbackItem(
            id="experience-missing",
            type="error",
            message="No work experience listed",
            impact="high",
            field="experience",
            suggestion="Add relevant work experience, including internships or volunteer work if applicable",
        ))

    items.sort(key=lambda item: IMPACT_ORDER[item.impact], reverse=True)
    logger.debug("Generated %d feedback items", len(items))
    return items

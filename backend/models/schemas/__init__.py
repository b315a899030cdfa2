"""Pydantic contracts for the ATS scoring engines."""

from models.schemas.ats_evaluation import (
    AtsIssue,
    BasicAtsEvaluation,
    BasicResumeScore,
    EnhancedAtsEvaluation,
    EnhancedResumeScore,
    FeedbackItem,
    FullAtsCheck,
    QuickCheckResult,
    TextAtsEvaluation,
)
from models.schemas.resume_data import ResumeData

__all__ = [
    "ResumeData",
    "EnhancedAtsEvaluation",
    "EnhancedResumeScore",
    "QuickCheckResult",
    "BasicAtsEvaluation",
    "BasicResumeScore",
    "FeedbackItem",
    "TextAtsEvaluation",
    "AtsIssue",
    "FullAtsCheck",
]

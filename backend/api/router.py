import logging

from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import FullCheckRequest, QuickCheckRequest, ScoreRequest, TextCheckRequest
from models.responses import FeedbackResponse
from models.schemas import (
    BasicResumeScore,
    EnhancedAtsEvaluation,
    EnhancedResumeScore,
    FullAtsCheck,
    QuickCheckResult,
    TextAtsEvaluation,
)
from services import ats

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.post("/ats/score", response_model=EnhancedResumeScore)
@limiter.limit(settings.rate_limit)
async def score_resume(request: Request, body: ScoreRequest):
    result = ats.calculate_enhanced_ats_score(body.resume, body.target_role, body.industry)
    logger.info("Scored resume: overall=%d ats=%d", result.overall, result.ats)
    return result


@router.post("/ats/evaluate", response_model=EnhancedAtsEvaluation)
@limiter.limit(settings.rate_limit)
async def evaluate_resume(request: Request, body: ScoreRequest):
    evaluation = ats.EnhancedAtsScorer(body.resume, body.target_role, body.industry).calculate_score()
    logger.info("Evaluated resume: score=%d", evaluation.score)
    return evaluation


@router.post("/ats/score/basic", response_model=BasicResumeScore)
@limiter.limit(settings.rate_limit)
async def score_resume_basic(request: Request, body: ScoreRequest):
    result = ats.calculate_resume_score(body.resume, body.target_role, body.industry)
    logger.info("Basic score: overall=%d", result.overall)
    return result


@router.post("/ats/quick-check", response_model=QuickCheckResult)
@limiter.limit(settings.rate_limit)
async def quick_check(request: Request, body: QuickCheckRequest):
    result = ats.quick_ats_check(body.resume)
    logger.info("Quick check: score=%d status=%s", result.score, result.status)
    return result


@router.post("/ats/feedback", response_model=FeedbackResponse)
@limiter.limit(settings.rate_limit)
async def feedback(request: Request, body: ScoreRequest):
    score = ats.calculate_resume_score(body.resume, body.target_role, body.industry)
    items = ats.generate_feedback(score, body.resume)
    logger.info("Feedback: overall=%d items=%d", score.overall, len(items))
    return FeedbackResponse(score=score, feedback=items)


@router.post("/ats/check-text", response_model=TextAtsEvaluation)
@limiter.limit(settings.rate_limit)
async def check_text(request: Request, body: TextCheckRequest):
    _validate_text(body.text)
    result = ats.evaluate_ats_compatibility_from_text(
        body.text, body.target_role, body.industry, body.file_type
    )
    logger.info("Text check: score=%d", result.score)
    return result


@router.post("/ats/full-check", response_model=FullAtsCheck)
@limiter.limit(settings.rate_limit)
async def full_check(request: Request, body: FullCheckRequest):
    _validate_text(body.text)
    result = ats.run_full_ats_check(body.text, body.file_type)
    logger.info(
        "Full check: score=%d issues=%d file_compatible=%s",
        result.overall_score, len(result.issues), result.file_compatibility.compatible,
    )
    return result


def _validate_text(text: str) -> None:
    if not text.strip():
        logger.warning("Rejected text check: empty text")
        raise HTTPException(status_code=400, detail="Resume text is empty")

    if len(text) > settings.max_text_length:
        logger.warning("Rejected text check: %d chars", len(text))
        raise HTTPException(
            status_code=400,
            detail=f"Resume text too long (max {settings.max_text_length} chars)",
        )

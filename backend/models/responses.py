from pydantic import BaseModel

from models.schemas.ats_evaluation import BasicResumeScore, FeedbackItem


class FeedbackResponse(BaseModel):
    score: BasicResumeScore = BasicResumeScore()
    feedback: list[FeedbackItem] = []

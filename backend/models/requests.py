from pydantic import BaseModel, Field

from models.schemas.resume_data import ResumeData


class ScoreRequest(BaseModel):
    resume: ResumeData
    target_role: str | None = Field(None, max_length=200, description="Role to match keywords against")
    industry: str | None = Field(None, max_length=200, description="Industry keyword table to use")


class QuickCheckRequest(BaseModel):
    resume: ResumeData


class TextCheckRequest(BaseModel):
    text: str = Field(..., description="Plain text CV content")
    target_role: str | None = Field(None, max_length=200)
    industry: str | None = Field(None, max_length=200)
    file_type: str | None = Field(None, max_length=100, description="Source file type, e.g. application/pdf")


class FullCheckRequest(BaseModel):
    text: str = Field(..., description="Plain text CV content")
    file_type: str = Field("pdf", max_length=100, description="Upload extension, e.g. pdf or docx")

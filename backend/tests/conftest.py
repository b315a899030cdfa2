"""Shared test configuration and resume fixtures."""

import pytest

from models.schemas.resume_data import ResumeData


def make_full_resume() -> dict:
    """A complete, realistic resume as the CV builder would send it."""
    return {
        "personal_info": {
            "full_name": "Jane Doe",
            "email": "jane.doe@example.com",
            "phone": "555-123-4567",
            "location": "Austin, TX",
            "linkedin": "linkedin.com/in/janedoe",
            "github": "github.com/janedoe",
            "website": "",
            "summary": (
                "Results-driven software engineer with 6 years of experience building "
                "cloud microservices and data-driven products for 2 million users."
            ),
        },
        "experience": [
            {
                "company": "TechCorp",
                "position": "Senior Software Engineer",
                "location": "Austin, TX",
                "start_date": "2021-01",
                "end_date": "",
                "current": True,
                "description": "Led a team of 5 engineers building REST APIs in Python and React.",
                "achievements": [
                    "Improved API latency by 40% across 12 services.",
                    "Delivered a payments platform that generated $2000000 in revenue.",
                    "Reduced cloud costs by 25% with serverless jobs.",
                ],
            },
            {
                "company": "StartupXYZ",
                "position": "Software Engineer",
                "location": "Remote",
                "start_date": "2018-06",
                "end_date": "2020-12",
                "current": False,
                "description": "Developed React frontends and Node.js services.",
                "achievements": [
                    "Built CI/CD pipelines used by 30 projects.",
                    "Increased test coverage from 40% to 85%.",
                ],
            },
        ],
        "education": [
            {
                "institution": "State University",
                "degree": "B.S.",
                "field": "Computer Science",
                "graduation_date": "2018",
            },
        ],
        "skills": [
            {"category": "Languages", "skills": ["Python", "JavaScript", "TypeScript", "SQL"]},
            {"category": "Tools", "skills": ["Docker", "Kubernetes", "AWS", "Git"]},
        ],
        "projects": [
            {
                "name": "ATS Helper",
                "description": "Open source resume checker.",
                "technologies": ["Python", "FastAPI"],
            },
        ],
        "certifications": [
            {"name": "AWS Solutions Architect", "issuer": "Amazon", "date": "2022"},
        ],
        "languages": [{"language": "English", "proficiency": "Native"}],
    }


def make_description_resume(description: str, **personal) -> ResumeData:
    """Resume whose scored text is a single experience description."""
    return ResumeData.model_validate({
        "personal_info": personal,
        "experience": [{"description": description}],
    })


@pytest.fixture
def full_resume_data() -> dict:
    return make_full_resume()


@pytest.fixture
def full_resume() -> ResumeData:
    return ResumeData.model_validate(make_full_resume())


@pytest.fixture
def empty_resume() -> ResumeData:
    return ResumeData()

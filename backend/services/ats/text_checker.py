"""ATS compatibility check over raw CV text.

Scores plain text the way an applicant tracking system sees an uploaded
file: detectable section headings, contact details, keyword coverage,
layout hazards, length and a few extras. Six capped parts summed to 0-100.
"""

import logging
import re

from models.schemas.ats_evaluation import TextAtsBreakdown, TextAtsEvaluation
from models.schemas.resume_data import ResumeData, coerce_resume
from services.ats.text import clamp, round_half_up, round_int

logger = logging.getLogger(__name__)

ROLE_KEYWORDS: dict[str, tuple[str, ...]] = {
    "software engineer": (
        "JavaScript", "TypeScript", "React", "Node.js", "Python",
        "APIs", "SQL", "Git", "Agile", "Unit Testing",
    ),
    "frontend developer": (
        "React", "TypeScript", "Next.js", "CSS", "Tailwind",
        "Accessibility", "Design Systems", "Performance Optimization", "Testing", "JavaScript",
    ),
    "backend engineer": (
        "Node.js", "TypeScript", "Databases", "API Design", "Microservices",
        "Testing", "CI/CD", "Cloud", "Security", "Scalability",
    ),
    "data scientist": (
        "Python", "Machine Learning", "Statistics", "SQL", "Pandas",
        "TensorFlow", "Data Visualization", "Modeling", "Experimentation", "Feature Engineering",
    ),
    "product manager": (
        "Product Strategy", "Roadmap", "User Research", "Analytics", "Stakeholder Management",
        "Prioritization", "Go-To-Market", "KPIs", "Agile", "Cross-functional",
    ),
    "marketing": (
        "SEO", "SEM", "Content Strategy", "Campaigns", "Analytics",
        "Lead Generation", "Email Marketing", "Brand", "Conversions", "Social Media",
    ),
    "sales": (
        "Pipeline", "CRM", "Quota", "Prospecting", "Negotiation",
        "Closing", "Revenue", "Account Management", "Forecasting", "Relationship Building",
    ),
    "designer": (
        "Figma", "Prototyping", "User Research", "UX", "UI",
        "Interaction Design", "Typography", "Accessibility", "Design Systems", "Visual Design",
    ),
    "default": (
        "Leadership", "Communication", "Problem Solving", "Teamwork", "Project Management",
        "Strategic Planning", "Stakeholder Management", "Results-Oriented", "Collaboration", "Adaptability",
    ),
}

INDUSTRY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "technology": (
        "Software Development", "Cloud", "DevOps", "API", "Agile",
        "Scalability", "Innovation", "Security", "Product Development", "Automation",
    ),
    "finance": (
        "Financial Analysis", "Risk Management", "Compliance", "Budgeting", "Forecasting",
        "Portfolio", "Investment", "Audit", "Regulatory", "Accounting",
    ),
    "healthcare": (
        "Clinical", "Patient Care", "HIPAA", "Medical Records", "Healthcare Management",
        "Treatment", "Diagnosis", "Quality Improvement", "Compliance", "Health Systems",
    ),
    "marketing": (
        "Digital Marketing", "Campaigns", "Brand", "Audience", "Conversion",
        "Content", "Analytics", "Performance Marketing", "Demand Generation", "ROI",
    ),
    "sales": (
        "Pipeline", "Revenue", "Territory", "Prospecting", "Closing",
        "Negotiation", "Lead Generation", "Account Management", "Retention", "Customer Success",
    ),
    "education": (
        "Curriculum", "Instruction", "Assessment", "Student Engagement", "Learning Outcomes",
        "Instructional Design", "Professional Development", "Classroom Management",
        "Educational Technology", "Mentoring",
    ),
    "consulting": (
        "Strategy", "Stakeholder", "Process Improvement", "Change Management", "Client",
        "Analysis", "Implementation", "Business Case", "Workshops", "Deliverables",
    ),
    "default": (
        "Professional Experience", "Industry Knowledge", "Leadership", "Communication",
        "Problem Solving", "Team Collaboration", "Project Delivery", "Best Practices",
        "Continuous Improvement", "Stakeholders",
    ),
}

SECTION_PATTERNS: dict[str, re.Pattern] = {
    "summary": re.compile(r"(summary|objective|profile|about)\b", re.IGNORECASE),
    "experience": re.compile(r"(experience|employment|work history|professional experience)\b", re.IGNORECASE),
    "education": re.compile(r"(education|degree|university|college|academic)\b", re.IGNORECASE),
    "skills": re.compile(r"(skills|competencies|technical skills|expertise)\b", re.IGNORECASE),
    "contact": re.compile(r"(contact|email|phone|linkedin)\b", re.IGNORECASE),
}

LINKEDIN_RE = re.compile(r"linkedin\.com/(in|company)/", re.IGNORECASE)
PORTFOLIO_RE = re.compile(r"portfolio|github|behance", re.IGNORECASE)
EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b")
PHONE_RE = re.compile(r"\b(?:\+?\d{1,3}[\s-]?)?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}\b")
LOCATION_RE = re.compile(r"\b([A-Z][a-z]+\s?)+(city|town|state|country|,\s?[A-Z]{2})\b")
METRIC_RE = re.compile(
    r"\b(\d+%|\$\d+[kKmM]?|\d+\s?(customers?|clients?|users?|projects?|deals?|revenue|growth|roi))\b",
    re.IGNORECASE,
)
RESUME_WORD_RE = re.compile(r"\b(resume|curriculum vitae|cv)\b", re.IGNORECASE)

# Letters of any script, digits and a few symbols that appear in tech terms
WORD_RE = re.compile(r"\b(?:[^\W\d_]|[0-9+#.\-])+\b")
PLAIN_CHAR_RE = re.compile(r"""[^\W\d_]|[0-9\s.,;:'"()\-]""")
BULLET_RE = re.compile(r"[•◦▪■]")
EXCESSIVE_SPACING_RE = re.compile(r"\s{4,}")
SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")

MAX_STRUCTURE = 25
MAX_CONTACT = 20
MAX_KEYWORDS = 25
MAX_FORMATTING = 15
MAX_READABILITY = 10
MAX_EXTRAS = 15
MAX_LISTED_MISSING_KEYWORDS = 6

MSG_NO_EMAIL = "Add a professional email address to your header."
MSG_NO_PHONE = "Include a phone number in an ATS-friendly format (e.g., 123-456-7890)."
MSG_NO_LOCATION = "Mention your location or preferred location to help recruiters filter candidates."
MSG_NO_PROFILE_LINK = "Add a LinkedIn profile or professional portfolio link."
MSG_TABLES = "Tables or tabbed layouts can break in ATS parsing. Use simple bullet lists instead."
MSG_SPACING = "Large spacing or multi-column layouts may not parse correctly in ATS."
MSG_SPECIAL_CHARS = "Reduce heavy use of special characters; they can confuse ATS parsers."
MSG_TOO_SHORT = "Your resume looks brief. Expand experience details with impact statements."
MSG_TOO_LONG = "Consider trimming content to keep the resume concise for recruiters."
MSG_LONG_SENTENCES = "Long sentences decrease readability. Break them into short action-driven bullet points."
MSG_NO_METRICS = "Add quantifiable metrics (%, $, #) to highlight achievements."
MSG_LOW_COVERAGE = "Incorporate more role-specific and industry keywords naturally throughout the resume."


def _lookup_key(value: str | None, table: dict[str, tuple[str, ...]]) -> str:
    """Exact key, else the first key contained in the value, else 'default'."""
    if not value:
        return "default"
    normalized = value.strip().lower()
    if not normalized:
        return "default"
    if normalized in table:
        return normalized
    for key in table:
        if key != "default" and key in normalized:
            return key
    return "default"


def get_role_keyword_set(target_role: str | None = None) -> list[str]:
    return list(ROLE_KEYWORDS[_lookup_key(target_role, ROLE_KEYWORDS)])


def get_industry_keyword_set(industry: str | None = None) -> list[str]:
    return list(INDUSTRY_KEYWORDS[_lookup_key(industry, INDUSTRY_KEYWORDS)])


def _count_occurrences(text: str, keyword: str) -> int:
    pattern = re.compile(rf"\b{re.escape(keyword)}\b", re.IGNORECASE)
    return sum(1 for _ in pattern.finditer(text))


def evaluate_ats_compatibility_from_text(
    text: str | None,
    target_role: str | None = None,
    industry: str | None = None,
    file_type: str | None = None,
) -> TextAtsEvaluation:
    text = text or ""
    lower = text.lower()
    words = WORD_RE.findall(text)
    word_count = len(words) or 1
    sentences = [s.strip() for s in SENTENCE_SPLIT_RE.split(text) if s.strip()]
    avg_sentence_length = word_count / len(sentences) if sentences else word_count

    combined = list(dict.fromkeys(
        kw.strip()
        for kw in get_role_keyword_set(target_role) + get_industry_keyword_set(industry)
        if kw.strip()
    ))
    matched = [kw for kw in combined if kw.lower() in lower]
    missing = [kw for kw in combined if kw.lower() not in lower]

    occurrences = sum(_count_occurrences(text, kw) for kw in matched)
    keyword_density = round_half_up(occurrences / word_count * 100, 2)

    issues: list[str] = []

    missing_sections = [
        name for name, pattern in SECTION_PATTERNS.items() if not pattern.search(text)
    ]
    structure = clamp(5 * (len(SECTION_PATTERNS) - len(missing_sections)), 0, MAX_STRUCTURE)

    contact = 0
    if EMAIL_RE.search(text):
        contact += 7
    else:
        issues.append(MSG_NO_EMAIL)
    if PHONE_RE.search(text):
        contact += 5
    else:
        issues.append(MSG_NO_PHONE)
    if LOCATION_RE.search(text):
        contact += 3
    else:
        issues.append(MSG_NO_LOCATION)
    has_profile_link = bool(LINKEDIN_RE.search(lower) or PORTFOLIO_RE.search(text))
    if has_profile_link:
        contact += 5
    else:
        issues.append(MSG_NO_PROFILE_LINK)
    contact = clamp(contact, 0, MAX_CONTACT)

    formatting = MAX_FORMATTING
    table_indicators = text.count("|") + text.count("\t")
    if table_indicators > 10:
        formatting -= 7
        issues.append(MSG_TABLES)
    elif table_indicators > 0:
        formatting -= 4
    excessive_spacing = bool(EXCESSIVE_SPACING_RE.search(text))
    if excessive_spacing:
        formatting -= 3
        issues.append(MSG_SPACING)
    if len(BULLET_RE.findall(text)) > 100:
        formatting -= 2
    special_ratio = len(PLAIN_CHAR_RE.sub("", text)) / len(text) if text else 0.0
    if special_ratio > 0.25:
        formatting -= 3
        issues.append(MSG_SPECIAL_CHARS)
    formatting = clamp(formatting, 0, MAX_FORMATTING)

    readability = MAX_READABILITY
    if word_count < 200:
        readability -= 4
        issues.append(MSG_TOO_SHORT)
    elif word_count > 1500:
        readability -= 3
        issues.append(MSG_TOO_LONG)
    if avg_sentence_length > 30:
        readability -= 3
        issues.append(MSG_LONG_SENTENCES)
    elif 12 <= avg_sentence_length <= 25:
        readability += 1
    readability = clamp(readability, 0, MAX_READABILITY)

    extras = 5
    has_metrics = bool(METRIC_RE.search(text))
    if has_metrics:
        extras += 2
    else:
        issues.append(MSG_NO_METRICS)
    if file_type and "pdf" in file_type.lower():
        extras += 1
    if RESUME_WORD_RE.search(text):
        extras += 1
    extras = clamp(extras, 0, MAX_EXTRAS)

    coverage = len(matched) / len(combined) * 100 if combined else 0.0
    keywords = clamp(coverage / 100 * MAX_KEYWORDS, 0, MAX_KEYWORDS)
    if coverage < 40:
        issues.append(MSG_LOW_COVERAGE)

    breakdown = TextAtsBreakdown(
        structure=structure,
        contact=contact,
        keywords=keywords,
        formatting=formatting,
        readability=readability,
        extras=extras,
    )
    score = int(clamp(
        round_int(structure + contact + keywords + formatting + readability + extras), 0, 100
    ))

    suggestions: list[str] = []
    if missing_sections:
        names = ", ".join(name.capitalize() for name in missing_sections)
        suggestions.append(f"Add or strengthen these sections: {names}.")
    if missing:
        listed = ", ".join(missing[:MAX_LISTED_MISSING_KEYWORDS])
        suggestions.append(
            f"We couldn't find {listed}. Integrate them where relevant to boost keyword matching."
        )
    if not has_profile_link:
        suggestions.append("Add a LinkedIn or professional portfolio link in the contact section.")
    if not has_metrics:
        suggestions.append("Quantify achievements (e.g., grew revenue by 30%, managed 5-member team).")
    if table_indicators > 0 or excessive_spacing:
        suggestions.append("Use a single-column layout with simple bullet lists for ATS safety.")
    if coverage < 60:
        suggestions.append(
            "Tailor your resume to the target role by mirroring terminology from job descriptions."
        )

    logger.debug("Text ATS score %d (words=%d, coverage=%.1f)", score, len(words), coverage)

    return TextAtsEvaluation(
        score=score,
        breakdown=breakdown,
        matched_keywords=matched,
        missing_keywords=missing,
        keyword_density=keyword_density,
        missing_sections=missing_sections,
        issues=list(dict.fromkeys(issues)),
        suggestions=list(dict.fromkeys(suggestions)),
    )


def _chunk(parts) -> str:
    return "\n".join(p for p in parts if p)


def render_resume_text(resume: ResumeData) -> str:
    """Lay a structured resume out as plain text, one blank line between blocks."""
    info = resume.personal_info
    chunks = [_chunk([
        info.full_name, info.summary, info.location, info.email,
        info.phone, info.linkedin, info.github, info.website,
    ])]

    for exp in resume.experience:
        chunks.append(_chunk([
            exp.position, exp.company, exp.location, exp.start_date, exp.end_date,
            "Present" if exp.current else "", exp.description, *exp.achievements,
        ]))
    for edu in resume.education:
        chunks.append(_chunk([edu.institution, edu.degree, edu.field, edu.graduation_date]))
    for group in resume.skills:
        chunks.append(", ".join(group.skills))
    for project in resume.projects:
        chunks.append(_chunk([
            project.name, project.description, ", ".join(project.technologies),
            project.link, project.github,
        ]))
    for cert in resume.certifications:
        chunks.append(_chunk([cert.name, cert.issuer, cert.date, cert.credential_id]))
    for lang in resume.languages:
        chunks.append(" - ".join(p for p in (lang.language, lang.proficiency) if p))

    return "\n\n".join(c for c in chunks if c)


def evaluate_ats_compatibility_from_resume(
    resume: ResumeData | dict,
    target_role: str | None = None,
    industry: str | None = None,
) -> TextAtsEvaluation:
    text = render_resume_text(coerce_resume(resume))
    return evaluate_ats_compatibility_from_text(text, target_role, industry)

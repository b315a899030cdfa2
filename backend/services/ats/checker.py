"""Severity-tagged ATS parsing issue detection over raw CV text.

Each detector emits an ``AtsIssue``; the compatibility score starts at 100
and loses a fixed amount per issue according to its severity.
"""

import logging
import re

from models.schemas.ats_evaluation import (
    AtsCheckSummary,
    AtsIssue,
    FileTypeCompatibility,
    FullAtsCheck,
)

logger = logging.getLogger(__name__)

# (id, heading names, required); the first name is used in messages
STANDARD_SECTIONS: tuple[tuple[str, tuple[str, ...], bool], ...] = (
    ("contact", ("contact", "contact information", "contact details"), True),
    ("summary", ("summary", "professional summary", "profile", "objective"), False),
    ("experience", ("experience", "work experience", "professional experience", "employment"), True),
    ("education", ("education", "academic background", "qualifications"), True),
    ("skills", ("skills", "technical skills", "competencies", "core competencies"), False),
    ("projects", ("projects", "key projects", "portfolio"), False),
    ("certifications", ("certifications", "certificates", "licenses"), False),
)

TABLE_MARKERS_RE = re.compile(r"[|│┃┆┇┊┋]")
TABULAR_DATA_RE = re.compile(r"\t{2,}")
MULTI_COLUMN_RE = re.compile(r"(.{20,})\s{5,}(.{20,})")
GRAPHICS_RE = re.compile(r"\[?(?:image|logo|photo|picture)\]?", re.IGNORECASE)
DECORATIVE_RE = re.compile(r"[═╔╗╚╝║─│┌┐└┘├┤┬┴┼]")
SMART_QUOTES_RE = re.compile(r"[‘’“”]")
LONG_URL_RE = re.compile(r"https?://\S{100,}", re.IGNORECASE)

EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PHONE_RE = re.compile(r"(?:\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")

DATE_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"\b(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\s*\d{4}\b", re.IGNORECASE),
    re.compile(r"\b\d{1,2}[/\-]\d{4}\b"),
    re.compile(r"\b\d{4}\s*[-–]\s*(present|current|now)\b", re.IGNORECASE),
)

MAX_DECORATIVE_CHARS = 5
MIN_WORDS = 200
MAX_WORDS = 1500
READY_THRESHOLD = 70

SEVERITY_PENALTY = {
    "critical": 25,
    "major": 15,
    "minor": 5,
    "info": 1,
}


def _count_words(text: str) -> int:
    return sum(1 for word in text.split() if len(word) > 1)


def find_missing_sections(text: str) -> list[str]:
    """Ids of required sections whose heading names never appear in the text."""
    lower = text.lower()
    return [
        section_id
        for section_id, names, required in STANDARD_SECTIONS
        if required and not any(name in lower for name in names)
    ]


def check_ats_compatibility(text: str | None) -> list[AtsIssue]:
    text = text or ""
    issues: list[AtsIssue] = []

    if TABLE_MARKERS_RE.search(text) or TABULAR_DATA_RE.search(text):
        issues.append(AtsIssue(
            type="formatting",
            severity="critical",
            title="Table formatting detected",
            description="Most ATS cannot parse tables correctly.",
            recommendation="Convert tables to simple bullet points.",
        ))

    if MULTI_COLUMN_RE.search(text):
        issues.append(AtsIssue(
            type="formatting",
            severity="major",
            title="Multi-column layout detected",
            description="Two-column layouts confuse ATS parsers.",
            recommendation="Use a single-column layout.",
        ))

    if GRAPHICS_RE.search(text):
        issues.append(AtsIssue(
            type="parsing",
            severity="major",
            title="Images or graphics detected",
            description="ATS cannot read text in images.",
            recommendation="Use plain text only.",
        ))

    if len(DECORATIVE_RE.findall(text)) > MAX_DECORATIVE_CHARS:
        issues.append(AtsIssue(
            type="formatting",
            severity="major",
            title="Decorative characters detected",
            description="Special characters can confuse parsing.",
            recommendation="Use simple dashes for separators.",
        ))

    if SMART_QUOTES_RE.search(text):
        issues.append(AtsIssue(
            type="compatibility",
            severity="minor",
            title="Smart quotes detected",
            description="Curly quotes may not convert properly.",
            recommendation="Use straight quotes instead.",
        ))

    if LONG_URL_RE.search(text):
        issues.append(AtsIssue(
            type="compatibility",
            severity="minor",
            title="Very long URL detected",
            description="Long URLs get truncated or split across lines by parsers.",
            recommendation="Shorten links to the profile or domain.",
        ))

    headings = {section_id: names[0] for section_id, names, _ in STANDARD_SECTIONS}
    for section_id in find_missing_sections(text):
        heading = headings[section_id]
        issues.append(AtsIssue(
            type="structure",
            severity="major",
            title=f"Missing {heading} section",
            description=f'ATS expects a "{heading}" section.',
            recommendation=f'Add a clear "{heading.upper()}" heading.',
        ))

    if not (EMAIL_RE.search(text) and PHONE_RE.search(text)):
        issues.append(AtsIssue(
            type="content",
            severity="critical",
            title="Missing contact information",
            description="ATS requires email and phone.",
            recommendation="Add email and phone at the top.",
        ))

    if not any(pattern.search(text) for pattern in DATE_PATTERNS):
        issues.append(AtsIssue(
            type="parsing",
            severity="major",
            title="Inconsistent date formats",
            description="ATS parses dates for experience duration.",
            recommendation='Use "Month YYYY - Month YYYY" format.',
        ))

    word_count = _count_words(text)
    if word_count < MIN_WORDS:
        issues.append(AtsIssue(
            type="content",
            severity="major",
            title="Resume too short",
            description=f"Only {word_count} words detected.",
            recommendation="Add more detail about experience and skills.",
        ))
    elif word_count > MAX_WORDS:
        issues.append(AtsIssue(
            type="content",
            severity="minor",
            title="Resume may be too long",
            description=f"{word_count} words detected.",
            recommendation="Consider condensing to 1-2 pages.",
        ))

    return issues


def calculate_ats_compatibility_score(issues: list[AtsIssue]) -> int:
    score = 100 - sum(SEVERITY_PENALTY.get(issue.severity, 0) for issue in issues)
    return max(0, min(100, score))


def check_file_type_compatibility(file_type: str) -> FileTypeCompatibility:
    """Verdict for an upload extension; accepts 'pdf' as well as '.PDF'."""
    kind = file_type.strip().lower().lstrip(".")

    if kind == "pdf":
        return FileTypeCompatibility(
            compatible=True,
            warnings=["Ensure PDF is text-based, not scanned."],
            recommendation="PDF is widely supported.",
        )
    if kind in ("docx", "doc"):
        return FileTypeCompatibility(
            compatible=True,
            warnings=["Old .doc format has less support."] if kind == "doc" else [],
            recommendation=".docx is most universally compatible.",
        )
    return FileTypeCompatibility(
        compatible=False,
        warnings=[f"{kind} may not parse correctly."],
        recommendation="Use .docx or .pdf format.",
    )


def run_full_ats_check(text: str | None, file_type: str = "pdf") -> FullAtsCheck:
    issues = check_ats_compatibility(text)
    score = calculate_ats_compatibility_score(issues)
    critical = sum(1 for issue in issues if issue.severity == "critical")
    major = sum(1 for issue in issues if issue.severity == "major")

    logger.debug("Full ATS check: score=%d critical=%d major=%d", score, critical, major)

    return FullAtsCheck(
        overall_score=score,
        issues=issues,
        file_compatibility=check_file_type_compatibility(file_type),
        summary=AtsCheckSummary(
            critical_count=critical,
            major_count=major,
            passes_basic_parsing=critical == 0,
            ready_for_submission=score >= READY_THRESHOLD and critical == 0,
        ),
    )

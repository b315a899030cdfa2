"""Fixed lookup tables for the enhanced ATS scorer.

Tables are plain immutable data (tuples / frozensets) so they can be
inspected in tests and extended without touching scoring logic. Order in
the tuples is significant: matched/missing keyword lists follow it.
"""

# ---------------------------------------------------------------------------
# Action verbs (exact token match)
# ---------------------------------------------------------------------------
ACTION_VERBS: dict[str, tuple[str, ...]] = {
    "leadership": (
        "led", "managed", "directed", "supervised", "orchestrated",
        "coordinated", "oversaw", "spearheaded", "championed", "headed",
    ),
    "achievement": (
        "achieved", "accomplished", "delivered", "completed", "executed",
        "produced", "generated", "attained", "exceeded", "surpassed",
    ),
    "improvement": (
        "improved", "enhanced", "optimized", "streamlined", "refined",
        "upgraded", "modernized", "transformed", "revitalized", "strengthened",
    ),
    "creation": (
        "created", "developed", "built", "designed", "implemented",
        "launched", "established", "pioneered", "initiated", "founded",
    ),
    "analysis": (
        "analyzed", "evaluated", "assessed", "examined", "investigated",
        "researched", "studied", "identified", "diagnosed", "measured",
    ),
    "communication": (
        "presented", "communicated", "explained", "articulated", "negotiated",
        "collaborated", "liaised", "facilitated", "conveyed", "persuaded",
    ),
}

ALL_ACTION_VERBS: frozenset[str] = frozenset(
    verb for verbs in ACTION_VERBS.values() for verb in verbs
)

# Substring match against the full text; each verb counts once
ACHIEVEMENT_VERBS: tuple[str, ...] = (
    "achieved", "delivered", "improved", "increased", "reduced", "generated",
)

# ---------------------------------------------------------------------------
# Industry keywords: sub-categories are flattened per industry
# ---------------------------------------------------------------------------
INDUSTRY_KEYWORDS: dict[str, dict[str, tuple[str, ...]]] = {
    "technology": {
        "software": (
            "javascript", "typescript", "react", "node.js", "python", "java",
            "api", "rest", "graphql", "microservices", "cloud", "devops",
            "agile", "scrum", "git", "docker", "kubernetes", "aws", "azure", "gcp",
        ),
        "data": (
            "sql", "nosql", "machine learning", "deep learning", "data analysis",
            "statistics", "visualization", "pandas", "tensorflow", "pytorch",
            "spark", "hadoop", "etl", "big data", "analytics",
        ),
        "security": (
            "cybersecurity", "encryption", "vulnerability",
            "penetration testing", "firewall",
        ),
        "cloud": (
            "serverless", "terraform", "cloudformation", "lambda", "ec2", "s3",
        ),
    },
    "finance": {
        "banking": (
            "risk management", "compliance", "regulatory", "financial analysis",
            "investment", "portfolio", "trading", "derivatives", "credit", "lending",
        ),
        "accounting": (
            "financial reporting", "gaap", "ifrs", "audit", "tax", "budgeting",
            "forecasting", "financial planning", "reconciliation", "accounts payable",
        ),
        "fintech": (
            "digital banking", "blockchain", "cryptocurrency", "payment systems",
            "financial technology", "open banking", "regtech", "insurtech",
        ),
    },
    "marketing": {
        "digital": (
            "seo", "sem", "ppc", "social media marketing", "content marketing",
            "email marketing", "google analytics", "conversion optimization",
            "a/b testing", "marketing automation",
        ),
        "brand": (
            "brand management", "brand strategy", "positioning", "brand identity",
            "messaging", "brand development", "market research", "consumer insights",
        ),
        "product": (
            "product marketing", "go-to-market", "product launch",
            "competitive analysis", "pricing strategy", "product positioning",
        ),
    },
    "healthcare": {
        "clinical": (
            "patient care", "clinical operations", "medical records", "hipaa",
            "ehr", "emr", "clinical trials", "healthcare compliance",
        ),
        "administration": (
            "healthcare management", "revenue cycle", "billing", "medical coding",
            "practice management", "quality improvement",
        ),
        "technology": (
            "health informatics", "telehealth", "digital health",
            "medical devices", "healthcare it", "interoperability",
        ),
    },
}

# Matched when the lower-cased target role contains the key; first key wins
ROLE_KEYWORDS: dict[str, tuple[str, ...]] = {
    "software engineer": (
        "javascript", "react", "node.js", "python", "api", "git", "agile",
    ),
    "data scientist": (
        "python", "machine learning", "statistics", "sql", "tensorflow",
        "data visualization", "modeling",
    ),
    "product manager": (
        "product strategy", "roadmap", "user research", "analytics",
        "stakeholder management", "agile", "prioritization",
    ),
    "marketing manager": (
        "seo", "content strategy", "social media", "campaign management",
        "analytics", "brand management", "email marketing",
    ),
    "financial analyst": (
        "financial analysis", "financial modeling", "forecasting", "budgeting",
        "excel", "variance analysis", "reporting",
    ),
}

# ---------------------------------------------------------------------------
# Vocabulary lists (exact token match)
# ---------------------------------------------------------------------------
PROFESSIONAL_LANGUAGE: frozenset[str] = frozenset({
    "strategic", "innovative", "collaborative", "analytical",
    "detail-oriented", "results-driven", "proactive", "adaptable",
    "versatile", "comprehensive", "cross-functional", "data-driven",
})

TECHNICAL_TERMS: dict[str, tuple[str, ...]] = {
    "software": (
        "api", "sdk", "framework", "library", "database", "algorithm",
        "architecture", "scalability", "performance", "security",
    ),
    "devops": (
        "deployment", "infrastructure", "monitoring", "automation",
        "containerization", "orchestration", "pipeline",
    ),
    "data": (
        "analytics", "visualization", "statistics", "modeling", "prediction", "etl",
    ),
    "web": (
        "frontend", "backend", "full-stack", "responsive", "accessibility",
        "optimization",
    ),
}

ALL_TECHNICAL_TERMS: frozenset[str] = frozenset(
    term for terms in TECHNICAL_TERMS.values() for term in terms
)

# Substring match against the full text
MODERN_TECH_TERMS: tuple[str, ...] = (
    "cloud", "ai", "machine learning", "blockchain", "devops",
    "microservices", "serverless",
)


def normalize_option(value: str | None) -> str | None:
    """Lower-case and trim a free-form role/industry option; blank -> None."""
    if not value:
        return None
    value = value.strip().lower()
    return value or None


def get_industry_keywords(industry: str | None) -> list[str]:
    """Flat keyword list for an industry; unknown or missing -> empty."""
    key = normalize_option(industry)
    if key is None or key not in INDUSTRY_KEYWORDS:
        return []
    return list(dict.fromkeys(
        kw for group in INDUSTRY_KEYWORDS[key].values() for kw in group
    ))


def get_role_keywords(target_role: str | None) -> list[str]:
    """Role-specific keywords by substring match on the role title."""
    role = normalize_option(target_role)
    if role is None:
        return []
    for key, keywords in ROLE_KEYWORDS.items():
        if key in role:
            return list(keywords)
    return []


def get_target_keywords(target_role: str | None, industry: str | None) -> list[str]:
    """Industry keywords followed by role keywords, deduplicated in order."""
    return list(dict.fromkeys(
        get_industry_keywords(industry) + get_role_keywords(target_role)
    ))

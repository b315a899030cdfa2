"""Keyword libraries for the basic ATS scorer.

Separate from the enhanced scorer tables. Role lookup here is an exact
hyphenated slug, not a substring match.
"""

import re

# Keyed by hyphenated role slug; lookups replace whitespace with hyphens
ROLE_KEYWORDS: dict[str, tuple[str, ...]] = {
    "software-engineer": (
        "javascript", "typescript", "python", "java", "react", "node.js", "angular", "vue",
        "api", "rest", "graphql", "database", "sql", "nosql", "git", "agile", "scrum",
        "testing", "debugging", "ci/cd", "docker", "kubernetes", "aws", "azure", "gcp",
        "algorithms", "data structures", "design patterns", "microservices", "system design",
    ),
    "frontend-developer": (
        "html", "css", "javascript", "typescript", "react", "vue", "angular", "svelte",
        "responsive design", "accessibility", "wcag", "sass", "less", "tailwind", "bootstrap",
        "webpack", "vite", "component library", "state management", "redux", "api integration",
        "cross-browser", "performance optimization", "seo", "figma", "design systems",
    ),
    "backend-developer": (
        "node.js", "python", "java", "go", "rust", "c#", ".net", "django", "flask",
        "express", "fastapi", "spring", "rest api", "graphql", "microservices",
        "database optimization", "caching", "redis", "message queues", "rabbitmq", "kafka",
        "authentication", "authorization", "security", "scalability", "load balancing",
    ),
    "data-scientist": (
        "python", "r", "sql", "machine learning", "deep learning", "tensorflow", "pytorch",
        "pandas", "numpy", "scikit-learn", "statistics", "data visualization", "tableau",
        "jupyter", "nlp", "computer vision", "a/b testing", "hypothesis testing",
        "feature engineering", "model deployment", "mlops", "spark", "hadoop",
    ),
    "product-manager": (
        "product strategy", "roadmap", "user research", "market analysis", "competitive analysis",
        "agile", "scrum", "jira", "stakeholder management", "requirements gathering",
        "user stories", "prioritization", "kpis", "metrics", "analytics", "a/b testing",
        "go-to-market", "launch", "customer feedback", "cross-functional", "leadership",
    ),
    "designer": (
        "figma", "sketch", "adobe xd", "photoshop", "illustrator", "ui design", "ux design",
        "user research", "wireframing", "prototyping", "design systems", "typography",
        "color theory", "accessibility", "responsive design", "user testing", "persona",
        "journey mapping", "information architecture", "interaction design",
    ),
    "devops-engineer": (
        "aws", "azure", "gcp", "docker", "kubernetes", "terraform", "ansible", "jenkins",
        "github actions", "gitlab ci", "monitoring", "prometheus", "grafana", "elk stack",
        "linux", "bash", "python", "infrastructure as code", "security", "networking",
        "load balancing", "high availability", "disaster recovery", "sre",
    ),
    "project-manager": (
        "project planning", "risk management", "stakeholder management", "resource allocation",
        "budget management", "scheduling", "agile", "waterfall", "scrum", "kanban",
        "jira", "ms project", "asana", "communication", "leadership", "problem solving",
        "vendor management", "pmp", "prince2", "cross-functional teams",
    ),
}

INDUSTRY_KEYWORDS: dict[str, dict[str, tuple[str, ...]]] = {
    "technology": {
        "general": ("saas", "b2b", "b2c", "startup", "enterprise", "agile", "innovation", "digital transformation"),
        "cloud": ("aws", "azure", "gcp", "serverless", "iaas", "paas", "saas", "multi-cloud"),
        "security": ("cybersecurity", "encryption", "compliance", "gdpr", "soc2", "penetration testing"),
        "ai": ("machine learning", "artificial intelligence", "nlp", "computer vision", "generative ai"),
    },
    "finance": {
        "general": ("fintech", "banking", "investment", "trading", "risk management", "compliance"),
        "regulations": ("gdpr", "pci-dss", "sox", "aml", "kyc", "mifid", "basel"),
        "products": ("payments", "lending", "insurance", "wealth management", "blockchain"),
    },
    "healthcare": {
        "general": ("healthtech", "patient care", "clinical", "medical devices", "pharmaceuticals"),
        "regulations": ("hipaa", "fda", "ehr", "interoperability", "telehealth"),
        "technology": ("health informatics", "digital health", "wearables", "diagnostics"),
    },
    "ecommerce": {
        "general": ("retail", "marketplace", "omnichannel", "direct-to-consumer", "supply chain"),
        "metrics": ("conversion rate", "cart abandonment", "customer lifetime value", "aov"),
        "technology": ("shopify", "magento", "woocommerce", "payment processing"),
    },
    "marketing": {
        "digital": ("seo", "sem", "ppc", "social media", "content marketing", "email marketing"),
        "analytics": ("google analytics", "attribution", "roi", "cac", "ltv", "conversion"),
        "tools": ("hubspot", "salesforce", "marketo", "mailchimp", "segment"),
    },
}

ACTION_VERBS: dict[str, tuple[str, ...]] = {
    "leadership": (
        "led", "managed", "directed", "supervised", "orchestrated", "coordinated",
        "oversaw", "spearheaded", "championed", "headed", "mentored", "coached",
        "delegated", "motivated", "inspired", "guided",
    ),
    "achievement": (
        "achieved", "exceeded", "surpassed", "accomplished", "delivered", "completed",
        "attained", "earned", "won", "secured", "obtained", "realized",
    ),
    "creation": (
        "created", "designed", "developed", "built", "established", "launched",
        "initiated", "introduced", "pioneered", "founded", "constructed", "engineered",
    ),
    "improvement": (
        "improved", "enhanced", "optimized", "streamlined", "revamped", "transformed",
        "modernized", "upgraded", "refined", "strengthened", "accelerated", "boosted",
    ),
    "analysis": (
        "analyzed", "evaluated", "assessed", "researched", "investigated", "identified",
        "discovered", "diagnosed", "examined", "reviewed", "audited", "measured",
    ),
    "technical": (
        "engineered", "programmed", "configured", "integrated", "deployed", "automated",
        "debugged", "architected", "coded", "tested", "implemented", "maintained",
    ),
    "communication": (
        "presented", "communicated", "negotiated", "collaborated", "liaised", "influenced",
        "persuaded", "advocated", "articulated", "facilitated", "mediated",
    ),
}

# Flattened in category order; the same verb may appear under two categories
ALL_ACTION_VERBS: tuple[str, ...] = tuple(
    verb for verbs in ACTION_VERBS.values() for verb in verbs
)

SOFT_SKILLS: tuple[str, ...] = (
    "communication", "teamwork", "leadership", "problem-solving", "analytical",
    "creative", "detail-oriented", "organized", "time management", "adaptable",
    "collaborative", "proactive", "self-motivated", "critical thinking", "flexibility",
    "interpersonal", "negotiation", "conflict resolution", "decision making", "strategic",
)

TECH_WORDS: frozenset[str] = frozenset({
    "javascript", "python", "java", "react", "node", "sql", "aws", "docker",
    "kubernetes", "typescript", "api", "rest", "graphql", "git", "agile",
    "scrum", "ci", "cd", "database", "cloud", "microservices", "html", "css",
})

IMPACT_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"(\$|£|€)\s*\d+(\.\d+)?[kmb]?\b", re.IGNORECASE),
    re.compile(r"\d+(\.\d+)?%\s*(growth|increase|decrease|reduction|improvement|boost)", re.IGNORECASE),
    re.compile(r"\b\d+\s*(users|customers|clients|employees|team members|projects)", re.IGNORECASE),
    re.compile(r"(reduced|increased|improved|grew|saved|generated|delivered).*\d+", re.IGNORECASE),
    re.compile(r"\d+\s*(million|billion|thousand|hundred)\b", re.IGNORECASE),
    re.compile(r"\bx\d+\s*(faster|better|more efficient)", re.IGNORECASE),
    re.compile(r"\b\d+(\.\d+)?x\s*(increase|growth|improvement)", re.IGNORECASE),
    re.compile(r"\btop\s*\d+%", re.IGNORECASE),
    re.compile(r"\brank(ed)?\s*(#|number)?\s*\d+", re.IGNORECASE),
)

_NON_KEYWORD_CHARS_RE = re.compile(r"[^a-z0-9\s.-]")


def normalize_keyword(keyword: str) -> str:
    """Lower-case and strip characters the basic tokenizer discards."""
    return _NON_KEYWORD_CHARS_RE.sub("", keyword.lower()).strip()


def get_keywords_for_role(role: str) -> list[str]:
    """Exact slug lookup: 'Software Engineer' -> 'software-engineer'."""
    slug = re.sub(r"\s+", "-", role.lower())
    return list(ROLE_KEYWORDS.get(slug, ()))


def get_keywords_for_industry(industry: str) -> list[str]:
    groups = INDUSTRY_KEYWORDS.get(industry.lower())
    if not groups:
        return []
    return [kw for group in groups.values() for kw in group]


def count_impact_statements(text: str) -> int:
    return sum(
        sum(1 for _ in pattern.finditer(text)) for pattern in IMPACT_PATTERNS
    )

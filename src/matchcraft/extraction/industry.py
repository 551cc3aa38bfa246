"""Keyword-count industry classifier over the closed Industry enumeration."""

from __future__ import annotations

from matchcraft.extraction.skill_dictionary import tokenize
from matchcraft.models.request import Industry

INDUSTRY_KEYWORDS: dict[Industry, tuple[str, ...]] = {
    Industry.TECHNOLOGY: (
        "software", "saas", "cloud", "platform", "api", "backend", "frontend",
        "devops", "data engineer", "machine learning", "startup",
    ),
    Industry.FINANCE: (
        "finance", "financial", "bank", "banking", "investment", "investment portfolio",
        "audit", "gaap", "fp&a", "accounting", "trading", "fintech",
    ),
    Industry.HEALTHCARE: (
        "healthcare", "health", "patient", "clinical", "hospital", "medical",
        "nursing", "ehr", "hipaa", "pharmaceutical",
    ),
    Industry.EDUCATION: (
        "education", "school", "teaching", "teacher", "student", "students",
        "curriculum", "university", "faculty", "academic",
    ),
    Industry.MARKETING: (
        "marketing", "seo", "campaign", "campaigns", "brand", "content",
        "social media", "growth", "audience",
    ),
    Industry.SALES: (
        "sales", "quota", "sales pipeline", "crm", "prospecting", "account executive",
        "deal", "deals", "revenue", "territory",
    ),
    Industry.ENGINEERING: (
        "mechanical", "electrical", "civil", "autocad", "solidworks", "cad",
        "structural", "hardware", "embedded",
    ),
    Industry.DESIGN: (
        "design", "designer", "ux", "ui", "figma", "typography", "visual",
        "prototyping", "design portfolio",
    ),
    Industry.CONSULTING: (
        "consulting", "consultant", "client engagement", "advisory",
        "stakeholders", "engagements", "strategy",
    ),
    Industry.LEGAL: (
        "legal", "law", "attorney", "litigation", "counsel", "paralegal",
        "contracts", "regulatory",
    ),
    Industry.MANUFACTURING: (
        "manufacturing", "production", "plant", "assembly", "lean", "six sigma",
        "supply chain", "quality control",
    ),
    Industry.RETAIL: (
        "retail", "store", "merchandising", "inventory", "e-commerce", "shopper",
        "customer service", "point of sale",
    ),
}


def industry_scores(text: str) -> dict[Industry, int]:
    """Count keyword hits per industry on whole-token boundaries."""
    tokens = tokenize(text)
    joined = f" {' '.join(tokens)} "
    scores: dict[Industry, int] = {}
    for industry, keywords in INDUSTRY_KEYWORDS.items():
        score = 0
        for keyword in keywords:
            score += joined.count(f" {' '.join(tokenize(keyword))} ")
        scores[industry] = score
    return scores


def infer_industry(text: str) -> Industry | None:
    """Highest-scoring industry, or None when no keyword appears.

    Ties go to the industry listed first in the enumeration.
    """
    scores = industry_scores(text)
    best = max(Industry, key=lambda ind: scores[ind])
    if scores[best] <= 0:
        return None
    return best

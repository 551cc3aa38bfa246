"""Derive structured facts from normalized resume and job-posting text.

Everything here is deterministic: the same text always yields the same skills,
requirement split, years and labels. No randomness and no external calls.
"""

from __future__ import annotations

import logging
import re
from typing import Literal, Sequence

from matchcraft.extraction.industry import infer_industry
from matchcraft.extraction.skill_dictionary import DEFAULT_DICTIONARY, SkillDictionary
from matchcraft.models.analysis import MatchSignals
from matchcraft.models.document import JobPosting, ResumeDocument, Section
from matchcraft.models.request import ExperienceLevel
from matchcraft.parsers.normalizer import SECTION_TERMS, clean_text, normalize

logger = logging.getLogger(__name__)

Requirement = Literal["required", "preferred", "ignored"]

PREFERRED_RE = re.compile(
    r"\b(nice[ -]to[ -]haves?|not required|preferred|preferably|prefer|plus|bonus|"
    r"desired|desirable|ideally|advantageous|an advantage)\b"
)
REQUIRED_RE = re.compile(
    r"\b(must[ -]haves?|must|required|requirements?|minimum|mandatory|essential)\b"
)
IGNORED_HEADING_RE = re.compile(
    r"\b(about|benefits|perks|what we offer|who we are|compensation|salary|"
    r"equal opportunity|how to apply)\b"
)
CLAUSE_SPLIT_RE = re.compile(r"(?<=[.;!?])\s+")

YEARS_RE = re.compile(
    r"\b(\d{1,2})\s*\+?\s*(?:(?:-|\u2013|to)\s*(\d{1,2})\s*\+?\s*)?(?:years?|yrs?)\b",
    re.IGNORECASE,
)
MAX_PLAUSIBLE_YEARS = 50

SENIORITY_TITLE_PATTERNS: list[tuple[re.Pattern, ExperienceLevel]] = [
    (re.compile(r"\b(chief|vp|vice president|director|head of|executive|c-suite|partner)\b", re.I),
     ExperienceLevel.EXECUTIVE),
    (re.compile(r"\b(senior|sr\.?|lead|principal|staff|manager)\b", re.I), ExperienceLevel.SENIOR),
    (re.compile(r"\b(junior|jr\.?|entry[ -]level|intern|internship|graduate|associate|trainee)\b", re.I),
     ExperienceLevel.ENTRY),
]

MAX_TITLE_WORDS = 10


def extract_skills(
    source: str | Sequence[Section],
    dictionary: SkillDictionary = DEFAULT_DICTIONARY,
) -> frozenset[str]:
    """Canonical skills mentioned in raw text or in normalized sections."""
    return dictionary.find_skills(_as_text(source))


def extract_years(text: str) -> int | None:
    """Largest "N years" / "N+ years" / "N-M years" value in text, or None."""
    values: list[int] = []
    for m in YEARS_RE.finditer(text or ""):
        for group in m.groups():
            if group is not None and int(group) <= MAX_PLAUSIBLE_YEARS:
                values.append(int(group))
    return max(values) if values else None


def classify_clause(clause: str, inherited: Requirement | None = None) -> Requirement:
    """Decide whether one requirement clause is required, preferred or ignored.

    The clause's own marker wins; otherwise it inherits the heading's marker,
    and unmarked clauses default to required.
    """
    lowered = clause.lower()
    if PREFERRED_RE.search(lowered):
        return "preferred"
    if REQUIRED_RE.search(lowered):
        return "required"
    return inherited or "required"


def heading_marker(heading: str) -> Requirement | None:
    lowered = heading.lower()
    if not lowered:
        return None
    if PREFERRED_RE.search(lowered):
        return "preferred"
    if REQUIRED_RE.search(lowered):
        return "required"
    if IGNORED_HEADING_RE.search(lowered):
        return "ignored"
    return None


def classify_requirements(sections: Sequence[Section]) -> dict[Requirement, list[str]]:
    """Split job-posting bullets into required / preferred / ignored clauses.

    A heading that is not a known section label and carries no marker of its
    own ("Kubernetes" on a line by itself) continues the previous section and
    is classified as a clause.
    """
    buckets: dict[Requirement, list[str]] = {"required": [], "preferred": [], "ignored": []}
    current: Requirement | None = None
    for section in sections:
        marker = heading_marker(section.heading)
        lines = list(section.bullets)
        if marker is None and section.heading and section.heading.lower() not in SECTION_TERMS:
            marker = current
            lines.insert(0, section.heading)
        current = marker
        for line in lines:
            for clause in CLAUSE_SPLIT_RE.split(line):
                clause = clause.strip()
                if not clause:
                    continue
                buckets[classify_clause(clause, marker)].append(clause)
    return buckets


def extract_title(text: str) -> str | None:
    """First non-empty line of the posting when it is short enough to be a title."""
    for line in clean_text(text or "").split("\n"):
        line = line.strip().strip("#*_ ").strip()
        if line:
            return line if len(line.split()) <= MAX_TITLE_WORDS else None
    return None


def infer_seniority(title: str | None, required_years: int | None) -> ExperienceLevel | None:
    """Seniority from title keywords, else from required years, else unknown."""
    if title:
        for pattern, level in SENIORITY_TITLE_PATTERNS:
            if pattern.search(title):
                return level
    if required_years is not None:
        return ExperienceLevel.from_years(required_years)
    return None


def extract_resume(text: str, dictionary: SkillDictionary = DEFAULT_DICTIONARY) -> ResumeDocument:
    normalized = normalize(text)
    skills = extract_skills(normalized.sections, dictionary)
    years = extract_years(text)
    logger.debug("Resume: %d sections, %d skills, years=%s", len(normalized.sections), len(skills), years)
    return ResumeDocument(
        raw_text=text,
        sections=normalized.sections,
        skills=skills,
        experience_years=years,
    )


def extract_job(text: str, dictionary: SkillDictionary = DEFAULT_DICTIONARY) -> JobPosting:
    normalized = normalize(text)
    buckets = classify_requirements(normalized.sections)
    required = extract_skills("\n".join(buckets["required"]), dictionary)
    preferred = extract_skills("\n".join(buckets["preferred"]), dictionary) - required
    required_years = extract_years("\n".join(buckets["required"] + buckets["preferred"]))
    title = extract_title(text)
    seniority = infer_seniority(title, required_years)
    industry = infer_industry(text)
    logger.debug(
        "Job: %d required, %d preferred, seniority=%s, industry=%s",
        len(required), len(preferred), seniority, industry,
    )
    return JobPosting(
        raw_text=text,
        sections=normalized.sections,
        required=required,
        preferred=preferred,
        seniority=seniority,
        industry=industry,
        required_years=required_years,
        title=title,
    )


def build_signals(
    resume: ResumeDocument,
    job: JobPosting,
    dictionary: SkillDictionary = DEFAULT_DICTIONARY,
) -> MatchSignals:
    """Pair one resume with one job posting."""
    job_terms = dictionary.find_terms(job.raw_text)
    resume_terms = dictionary.find_terms(resume.raw_text)
    return MatchSignals(
        resume_skills=resume.skills,
        required=job.required,
        preferred=job.preferred,
        keyword_density=dict(sorted(job_terms.items())),
        skill_frequency=dict(sorted(dictionary.frequencies(job_terms).items())),
        resume_terms=frozenset(resume_terms),
    )


def _as_text(source: str | Sequence[Section]) -> str:
    if isinstance(source, str):
        return source
    lines: list[str] = []
    for section in source:
        if section.heading:
            lines.append(section.heading)
        lines.extend(section.bullets)
    return "\n".join(lines)

"""Clean raw resume / job-description text and split it into sections."""

from __future__ import annotations

import re

from matchcraft.extraction.skill_dictionary import DEFAULT_DICTIONARY, tokenize
from matchcraft.models.document import NormalizedText, Section

# Shared emoji pattern for pasted-document cleanup
EMOJI_PATTERN = (
    r"[\U0001f4e7\U0001f4de\U0001f4cd\U0001f4bc\U0001f4c5\U0001f393"
    r"\U0001f3e2\U0001f4dd\U0001f4c4\U0001f517\U0001f310\U0001f4f1"
    r"\u260e\u2709\u2706\u2702]\s*"
)

BULLET_RE = re.compile(r"^\s*(?:[-*+]|\d{1,2}[.)])\s+")

# Labels that open a section even when written inline ("Skills: Python, SQL")
SECTION_TERMS = frozenset({
    "about", "about us", "about the role", "benefits", "bonus", "certifications",
    "competencies", "core competencies", "education", "employment", "experience",
    "highlights", "languages", "minimum qualifications", "must have", "nice to have",
    "objective", "perks", "preferred", "preferred qualifications", "preferred skills",
    "professional experience", "profile", "projects", "publications", "qualifications",
    "required", "required qualifications", "required skills", "requirements",
    "responsibilities", "skills", "summary", "technical skills", "tools",
    "what you'll do", "what we offer", "work experience",
})

INLINE_LABEL_RE = re.compile(r"^([A-Za-z][A-Za-z '&/-]{1,40}):\s+(\S.*)$")

MAX_HEADING_WORDS = 6
MAX_HEADING_CHARS = 50
SMALL_WORDS = frozenset({"a", "an", "and", "at", "for", "in", "of", "on", "or", "the", "to", "with", "&"})


def clean_text(text: str) -> str:
    """Clean copy-paste artifacts from resume or job-posting text.

    Handles: unicode artifacts, emoji icons, excessive whitespace,
    inconsistent bullet styles, and trailing whitespace.
    """
    # 1. Remove unicode artifacts (BOM, zero-width spaces, soft hyphens)
    text = text.lstrip("\ufeff")
    text = re.sub(r"[\u200b\u200c\u200d\u00ad\u2060\ufeff]", "", text)
    text = text.replace("\r\n", "\n").replace("\r", "\n")

    # 2. Remove emoji icons commonly used in exported resumes
    text = re.sub(EMOJI_PATTERN, "", text)

    # 3. Normalize bullet points (●, •, ◦, ◆, ■, ▪, ★, ○, ➢, – → -)
    text = re.sub(r"^(\s*)[\u25cf\u2022\u25e6\u25c6\u25a0\u25aa\u2605\u25cb\u27a2\u2013]\s*", r"\1- ", text, flags=re.MULTILINE)
    # Normalize asterisk-heavy bullets (* followed by excessive spaces)
    text = re.sub(r"^(\s*)\*\s{2,}", r"\1- ", text, flags=re.MULTILINE)

    # 4. Collapse runs of spaces/tabs inside each line
    lines = [re.sub(r"[ \t]{2,}", " ", line).strip() for line in text.split("\n")]
    text = "\n".join(lines)

    # 5. Remove excessive blank lines (3+ → 2)
    text = re.sub(r"\n{3,}", "\n\n", text)

    return text.strip()


def heading_text(line: str) -> str:
    """Strip markdown heading and emphasis markers from a line."""
    return line.strip().strip("#*_ ").strip()


def is_heading(line: str) -> bool:
    """Short, capitalized, non-bulleted line without sentence punctuation."""
    stripped = heading_text(line)
    if not stripped or BULLET_RE.match(line):
        return False
    label = stripped[:-1].rstrip() if stripped.endswith(":") else stripped
    if not label or len(label) > MAX_HEADING_CHARS:
        return False
    if re.search(r"[.,;!?]$|[.;!?]\s", label):
        return False
    words = label.split()
    if len(words) > MAX_HEADING_WORDS or not label[0].isalpha():
        return False
    if label.lower() in SECTION_TERMS:
        return True
    if "," in label or is_skill_list(label):
        return False
    letters = [c for c in label if c.isalpha()]
    if letters and all(c.isupper() for c in letters):
        return True
    significant = [w for w in words if w.lower() not in SMALL_WORDS]
    return all(w[0].isupper() for w in significant if w[0].isalpha())


def is_skill_list(line: str) -> bool:
    """True when every token of the line, filler words aside, is a dictionary skill term."""
    chunks: list[list[str]] = [[]]
    for token in tokenize(line):
        if token in SMALL_WORDS:
            chunks.append([])
        else:
            chunks[-1].append(token)
    chunks = [c for c in chunks if c]
    if not chunks:
        return False
    for chunk in chunks:
        terms = DEFAULT_DICTIONARY.find_terms(" ".join(chunk))
        if sum(len(term.split()) * n for term, n in terms.items()) != len(chunk):
            return False
    return True


def split_inline_label(line: str) -> tuple[str, str] | None:
    """Split "Skills: Python, SQL" into ("Skills", "Python, SQL") for known labels."""
    if BULLET_RE.match(line):
        return None
    m = INLINE_LABEL_RE.match(line.strip())
    if m and m.group(1).strip().lower() in SECTION_TERMS:
        return m.group(1).strip(), m.group(2).strip()
    return None


def normalize(text: str) -> NormalizedText:
    """Segment text into ordered (heading, bullets) sections.

    Never raises. Lines before the first heading land in an unnamed section;
    text that yields nothing comes back whole as one unnamed bullet.
    """
    sections = _segment(clean_text(text or ""))
    if not sections:
        sections = [Section(heading="", bullets=(text.strip(),) if text and text.strip() else ())]
    return NormalizedText(raw_text=text or "", sections=tuple(sections))


def _segment(cleaned: str) -> list[Section]:
    sections: list[Section] = []
    heading = ""
    bullets: list[str] = []

    def flush() -> None:
        if heading or bullets:
            sections.append(Section(heading=heading, bullets=tuple(bullets)))

    for line in cleaned.split("\n"):
        if not line:
            continue
        inline = split_inline_label(line)
        if inline is not None:
            flush()
            heading, bullets = inline[0], [inline[1]]
            continue
        if is_heading(line):
            flush()
            heading, bullets = heading_text(line).rstrip(":").strip(), []
            continue
        bullet = BULLET_RE.sub("", line).strip()
        if bullet:
            bullets.append(bullet)
    flush()
    return sections

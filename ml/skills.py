"""
Skill extraction
----------------

Finds known skills (languages, frameworks, databases, cloud/devops tools,
soft skills, office/design tools) in free text using word-boundary regexes.

Hits are lowercased and deduplicated, keeping first-seen order: category
order first, then position in the text.
"""

import os
import re
from pathlib import Path

_FLAGS = re.IGNORECASE | re.ASCII

# (category, pattern) pairs, checked in this order.
# To support a new skill, add it to the right group; nothing else changes.
SKILL_PATTERNS = (
    (
        "languages",
        re.compile(
            r"\b(javascript|typescript|python|java|c\+\+|c#|ruby|php|swift|kotlin|go|rust|scala|r|matlab)\b",
            _FLAGS,
        ),
    ),
    (
        "frameworks",
        re.compile(
            r"\b(react|angular|vue|node\.?js|express|django|flask|spring|laravel|rails|next\.?js|nuxt)\b",
            _FLAGS,
        ),
    ),
    (
        "databases",
        re.compile(
            r"\b(mysql|postgresql|mongodb|redis|elasticsearch|oracle|sql\s?server|sqlite|cassandra)\b",
            _FLAGS,
        ),
    ),
    (
        "cloud_devops",
        re.compile(
            r"\b(aws|azure|gcp|docker|kubernetes|jenkins|git|github|gitlab|bitbucket|terraform|ansible)\b",
            _FLAGS,
        ),
    ),
    (
        "soft_skills",
        re.compile(
            r"\b(agile|scrum|kanban|leadership|management|communication|teamwork|problem\s?solving)\b",
            _FLAGS,
        ),
    ),
    (
        "tools",
        re.compile(
            r"\b(jira|confluence|slack|figma|sketch|photoshop|illustrator|excel|powerpoint|word)\b",
            _FLAGS,
        ),
    ),
)


# Extra terms live in a plain .txt so they can be updated without touching code.
def load_skill_terms(terms_file=None) -> list[str]:
    if terms_file is None:
        env_path = os.getenv("SKILL_TERMS_FILE")
        if not env_path:
            return []
        terms_file = env_path
    terms_file = Path(terms_file)

    seen = set()
    terms: list[str] = []

    if not terms_file.exists():
        print(f"[skills] heads up: {terms_file} not found; no extra skill terms")
        return terms

    # comments (#) and blank lines are skipped; everything else becomes a lowercase term
    for raw in terms_file.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        term = line.lower()
        if term not in seen:
            seen.add(term)
            terms.append(term)

    print(f"[skills] loaded {len(terms)} extra skill terms from {terms_file}")
    return terms


def build_custom_pattern(terms):
    """Compile extra terms into one word-boundary pattern (None if there are no terms)."""
    if not terms:
        return None
    # longest first so "react native" wins over "react" at the same position
    alternatives = "|".join(re.escape(t) for t in sorted(terms, key=len, reverse=True))
    return re.compile(rf"\b({alternatives})\b", _FLAGS)


def _active_patterns():
    patterns = list(SKILL_PATTERNS)
    if CUSTOM_PATTERN is not None:
        patterns.append(("custom", CUSTOM_PATTERN))
    return tuple(patterns)


# loaded once at import-time; read-only afterwards
CUSTOM_PATTERN = build_custom_pattern(load_skill_terms())
ACTIVE_PATTERNS = _active_patterns()


def extract_skills_by_category(text: str, patterns=ACTIVE_PATTERNS) -> dict[str, list[str]]:
    """
    Group skill hits by the category whose pattern found them.

    A skill is reported once, under the first category that matched it.
    Categories without hits are left out.
    """
    seen = set()
    grouped: dict[str, list[str]] = {}
    for category, pattern in patterns:
        for match in pattern.finditer(text):
            skill = match.group(0).lower()
            if skill in seen:
                continue
            seen.add(skill)
            grouped.setdefault(category, []).append(skill)
    return grouped


def extract_skills(text: str, patterns=ACTIVE_PATTERNS) -> list[str]:
    """
    Flat, ordered, deduplicated list of skills found in text.

    Example:
        "Built React apps on AWS with Docker and React Native"
        -> ["react", "aws", "docker"]
    """
    grouped = extract_skills_by_category(text, patterns)
    return [skill for skills in grouped.values() for skill in skills]

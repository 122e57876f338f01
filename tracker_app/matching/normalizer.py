"""
Security name normalization.

Rewrites are applied one after another, in list order, on the progressively
rewritten string. They do not commute: each rule sees the output of the
rules before it.
"""

import re

# Hyphen/underscore runs, including any whitespace around or between them
_SEPARATOR_RUN = r"(?:\s*[-_])+\s*"

REWRITE_RULES: tuple[tuple[re.Pattern, str], ...] = (
    (re.compile(r"\s+"), " "),
    (re.compile(_SEPARATOR_RUN), " "),
    (re.compile(r"\bLTD\b", re.IGNORECASE), "LIMITED"),
    (re.compile(r"\b&\b", re.IGNORECASE), "AND"),
    (re.compile(r"\bCO\b", re.IGNORECASE), "COMPANY"),
    (re.compile(r"\bSERV\b", re.IGNORECASE), "SERVICES"),
    (re.compile(r"\bIND\b", re.IGNORECASE), "INDUSTRIES"),
    (re.compile(r"\bAMC\b", re.IGNORECASE), "ASSET MANAGEMENT"),
)


def normalize_name(name: str) -> str:
    """
    Canonicalize a security name for comparison.

    Whitespace and separator runs collapse to single spaces, common
    abbreviations expand to their full form, and the result is trimmed.
    Letter case is otherwise preserved.

    Args:
        name: Raw security name

    Returns:
        Normalized name
    """
    for pattern, replacement in REWRITE_RULES:
        name = pattern.sub(replacement, name)
    return name.strip()

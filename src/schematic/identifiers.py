"""Identifier normalization for resource, field and action names.

Names in hyper-schema documents are free-form (``config-var``,
``app:identity``, ``oauth_token``).  They are turned into identifiers by
splitting on punctuation, capitalizing the pieces and concatenating them,
with a small set of acronyms canonicalized (``UserId`` -> ``UserID``).
"""
from __future__ import annotations

import re

from src.shared.constants import ACRONYMS, IDENTIFIER_SEPARATORS
from src.shared.errors import InvalidIdentifierError

_SEPARATORS = re.compile(IDENTIFIER_SEPARATORS)
_ACRONYM_SUFFIX = re.compile("(" + "|".join(ACRONYMS) + ")$")


def _cap_first(segment: str) -> str:
    return segment[:1].upper() + segment[1:]


def _canonical_acronym(match: re.Match[str]) -> str:
    acronym = match.group(0)
    # Long acronyms keep their tail (Oauth -> OAuth, Cname -> CName).
    if len(acronym) > 4:
        return acronym[:2].upper() + acronym[2:]
    return acronym.upper()


def normalize(raw: str, capitalize_first: bool) -> str:
    """Convert *raw* into a punctuation-free identifier.

    Every segment but the first is capitalized; the first one too when
    *capitalize_first* is set.  Known acronym suffixes are canonicalized
    after capitalization.

    Raises:
        InvalidIdentifierError: If *raw* is empty.
    """
    if not raw:
        raise InvalidIdentifierError()

    parts: list[str] = []
    for index, segment in enumerate(_SEPARATORS.split(raw)):
        if capitalize_first or index > 0:
            segment = _cap_first(segment)
        parts.append(_ACRONYM_SUFFIX.sub(_canonical_acronym, segment))
    return "".join(parts)


def initial_cap(raw: str) -> str:
    """Exported form: ``config-var`` -> ``ConfigVar``."""
    return normalize(raw, True)


def initial_low(raw: str) -> str:
    """Lower-camel form: ``config-var`` -> ``configVar``."""
    return normalize(raw, False)


def method_cap(raw: str) -> str:
    """Method-name form; ``GetItem`` and ``getItem`` normalize identically."""
    return initial_cap(raw.lower())

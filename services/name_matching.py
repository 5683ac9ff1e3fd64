from __future__ import annotations

import re
from typing import Iterable, List, Optional

from models.merge_result import MergeResult


CREDENTIAL_SUFFIXES = [
    # Degrees
    "mba", "phd", "md", "jd", "cpa", "pmp", "cfa", "cfp", "esq", "pe", "rn",
    "bs", "ba", "ms", "ma", "msc", "llm", "edd", "dba", "dmin", "psyd",
    "pharmd", "dnp", "dpt", "do", "dds", "dmd", "od", "dc", "dpm", "drph",
    "mph", "mha", "mpa", "msw", "lcsw", "lpc", "lmft",
    # Certifications
    "shrm-cp", "shrm-scp", "sphr", "phr",
    "cissp", "pmi-acp", "csm", "six sigma", "ceh", "ccna", "ccnp",
    "aws", "gcp", "azure",
]

# Suffix must be a whole word on both sides; "donald" keeps its "do".
_CREDENTIAL_RE = re.compile(
    r",?\s*\b(?:"
    + "|".join(re.escape(s) for s in sorted(CREDENTIAL_SUFFIXES, key=len, reverse=True))
    + r")\b",
    re.IGNORECASE,
)
_INITIAL_RE = re.compile(r"\b[a-z]\.\s*", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")


def _normalize_once(text: str) -> str:
    text = text.lower()
    text = _CREDENTIAL_RE.sub("", text)
    text = _INITIAL_RE.sub("", text)
    text = text.replace(".", "")
    return _WHITESPACE_RE.sub(" ", text).strip()


def normalize_name(name: Optional[str]) -> str:
    """Reduce a display name to the key used for "same person" comparisons.

    Lowercases, drops credential suffixes ("John Smith, MBA"), single-letter
    initials ("John D. Smith") and periods, then collapses whitespace. The
    pipeline is repeated until the key stops changing, since removing a period
    can expose a new suffix ("John Ph.D" -> "john phd" -> "john"). A trailing
    period after the last letter still reads as an initial, so "Jane Doe,
    Ph.D." keys as "jane doe, ph".
    """
    if not name:
        return ""
    current = str(name)
    while True:
        nxt = _normalize_once(current)
        if nxt == current:
            return nxt
        current = nxt


def names_match(name1: Optional[str], name2: Optional[str]) -> bool:
    return normalize_name(name1) == normalize_name(name2)


def name_exists_in_array(name: Optional[str], existing_names: Optional[Iterable[str]]) -> bool:
    normalized_new = normalize_name(name)
    if not normalized_new:
        return False
    return any(normalize_name(existing) == normalized_new for existing in (existing_names or []))


def find_new_names(incoming_names: Optional[Iterable[str]], existing_names: Optional[Iterable[str]]) -> List[str]:
    """Names from incoming_names not already present (after normalization)."""
    return merge_names(existing_names, incoming_names).added


def merge_names(existing_names: Optional[Iterable[str]], new_names: Optional[Iterable[str]]) -> MergeResult:
    """Append genuinely new names to an existing connection list.

    Existing entries are kept as-is and in order. Incoming names that
    normalize to an empty key are ignored; duplicates within the incoming
    batch itself land in already_existed.
    """
    existing = list(existing_names or [])
    seen = {normalize_name(n) for n in existing}
    added: List[str] = []
    already_existed: List[str] = []

    for name in new_names or []:
        key = normalize_name(name)
        if not key:
            continue
        if key in seen:
            already_existed.append(name)
        else:
            added.append(name)
            seen.add(key)

    return MergeResult(merged=existing + added, added=added, already_existed=already_existed)

# services/quizbank/aiken/resolver.py
"""
Resolve the text after ANSWER:/ANS:/CORRECT ANSWER: to option labels.

Stages are tried in order and the first non-empty result wins:

  1. letter scan          "B", "A and C", "a, d"
  2. exact content match  "Jupiter" -> the single option reading "Jupiter"
  3. delimited tokens     "Jupiter or Mars", "A + Saturn", "Venus; Earth"

A content match only counts when exactly one option normalizes to the text.
Two options that both read "Paris" are never guessed between.

Stage 3 splits on connector words and punctuation even when those are part
of an option's content ("salt and pepper, vinegar" becomes three tokens).
"""

from __future__ import annotations

import logging
import re
from typing import Callable, List, Optional, Sequence, Tuple

from .models import RawOption

logger = logging.getLogger(__name__)

_LETTER_RE = re.compile(r"\b[A-Za-z]\b")
_NON_ALNUM_RE = re.compile(r"[^0-9a-z]")
_CONNECTOR_RE = re.compile(r"\s*(?:\band\b|\bor\b|\+|&)\s*", re.IGNORECASE)
_SPLIT_RE = re.compile(r"[,;/]")
_SINGLE_LETTER_RE = re.compile(r"^[A-Za-z]$")


def normalize_content(text: str) -> str:
    return _NON_ALNUM_RE.sub("", text.lower())


def _dedup(labels: Sequence[str]) -> List[str]:
    seen: List[str] = []
    for label in labels:
        if label not in seen:
            seen.append(label)
    return seen


def _unique_content_match(text: str, options: Sequence[RawOption]) -> Optional[str]:
    needle = normalize_content(text)
    if not needle:
        return None
    hits = [o.label for o in options if normalize_content(o.content) == needle]
    if len(hits) != 1:
        return None
    return hits[0]


def scan_letters(raw: str, options: Sequence[RawOption]) -> List[str]:
    return _dedup([m.group(0).upper() for m in _LETTER_RE.finditer(raw)])


def match_exact_content(raw: str, options: Sequence[RawOption]) -> List[str]:
    label = _unique_content_match(raw, options)
    return [label] if label else []


def match_delimited_tokens(raw: str, options: Sequence[RawOption]) -> List[str]:
    found: List[str] = []
    for token in _SPLIT_RE.split(_CONNECTOR_RE.sub(",", raw)):
        token = token.strip()
        if not token:
            continue
        if _SINGLE_LETTER_RE.match(token):
            found.append(token.upper())
            continue
        label = _unique_content_match(token, options)
        if label:
            found.append(label)
    return _dedup(found)


Stage = Callable[[str, Sequence[RawOption]], List[str]]

RESOLVER_STAGES: Tuple[Tuple[str, Stage], ...] = (
    ("letters", scan_letters),
    ("exact-content", match_exact_content),
    ("delimited", match_delimited_tokens),
)


def resolve_answer(raw: str, options: Sequence[RawOption]) -> List[str]:
    """
    Returns candidate labels in first-seen order, or [] when nothing resolves.
    Labels are not checked against `options`; the caller reports unknown ones.
    """
    for name, stage in RESOLVER_STAGES:
        labels = stage(raw, options)
        if labels:
            logger.debug("ANSWER %r resolved by %s stage -> %s", raw, name, labels)
            return labels
    return []

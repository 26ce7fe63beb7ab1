from __future__ import annotations

import json
import re
import sys
import unicodedata


_NON_ALNUM_SPACE_RE = re.compile(r"[^a-z0-9 ]+")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(s: str) -> str:
    """
    Normalize a typed answer for matching:
    - unicode normalize (NFKD), strip diacritics
    - lowercase
    - drop apostrophes so "don't" -> "dont"
    - remove punctuation
    - collapse whitespace
    """
    if s is None:
        return ""
    s = str(s)
    s = unicodedata.normalize("NFKD", s)
    s = "".join(ch for ch in s if not unicodedata.combining(ch))
    s = s.lower()
    s = s.replace("'", "").replace("’", "")
    s = s.replace("-", " ").replace("_", " ")
    s = _NON_ALNUM_SPACE_RE.sub(" ", s)
    s = _WHITESPACE_RE.sub(" ", s).strip()
    return s


def _trace(enabled: bool, event: str, payload: dict) -> None:
    """
    Lightweight structured tracing to stderr.
    No-op when disabled.
    """
    if not enabled:
        return
    print(
        f"[trace] {event} {json.dumps(payload, ensure_ascii=False, default=str)}",
        file=sys.stderr,
    )

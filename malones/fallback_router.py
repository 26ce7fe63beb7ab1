from __future__ import annotations

from typing import Optional, Tuple

from rapidfuzz import fuzz, process

from .router_schema import AnswerOutput
from .utils import normalize_text


FUZZY_ACCEPT_THRESHOLD = 80.0
FUZZY_ACCEPT_GAP = 5.0

YES_VOCAB = [
    "yes",
    "y",
    "yeah",
    "yea",
    "yep",
    "yup",
    "aye",
    "sure",
    "ok",
    "okay",
    "of course",
    "definitely",
    "absolutely",
    "go on",
    "go on so",
    "grand",
    "why not",
    "i do",
    "i am",
    "i would",
]

NO_VOCAB = [
    "no",
    "n",
    "nope",
    "nah",
    "naw",
    "not really",
    "never",
    "no way",
    "no thanks",
    "not at all",
    "i dont",
    "i am not",
    "im not",
    "i wouldnt",
    "dont think so",
]

_NEGATORS = {"no", "not", "nope", "nah", "never", "dont", "wouldnt", "isnt", "arent"}


def _unknown() -> AnswerOutput:
    return AnswerOutput(intent="unknown")


def _best(query: str, vocab: list[str]) -> Tuple[Optional[str], float]:
    match = process.extractOne(query, vocab, scorer=fuzz.ratio)
    if match is None:
        return None, 0.0
    choice, score, _ = match
    return choice, float(score)


def route_with_rules(text: str) -> AnswerOutput:
    """
    Deterministic yes/no classifier.
    Must never raise for normal user input.
    """
    try:
        t = normalize_text(text)
        if not t:
            return _unknown()

        # 1) exact vocabulary hit
        if t in YES_VOCAB:
            return AnswerOutput(intent="yes", matched=t, score=100.0)
        if t in NO_VOCAB:
            return AnswerOutput(intent="no", matched=t, score=100.0)

        # 2) leading token ("no, I'm grand", "yes please")
        first = t.split()[0]
        if first in _NEGATORS:
            return AnswerOutput(intent="no", matched=first, score=100.0)
        if first in YES_VOCAB:
            return AnswerOutput(intent="yes", matched=first, score=100.0)

        # 3) fuzzy match, only when one side clearly wins
        yes_choice, yes_score = _best(t, YES_VOCAB)
        no_choice, no_score = _best(t, NO_VOCAB)

        if yes_score >= FUZZY_ACCEPT_THRESHOLD and (yes_score - no_score) >= FUZZY_ACCEPT_GAP:
            return AnswerOutput(intent="yes", matched=yes_choice, score=yes_score)
        if no_score >= FUZZY_ACCEPT_THRESHOLD and (no_score - yes_score) >= FUZZY_ACCEPT_GAP:
            return AnswerOutput(intent="no", matched=no_choice, score=no_score)

        return _unknown()
    except Exception:
        # Must never raise for normal user input.
        return _unknown()

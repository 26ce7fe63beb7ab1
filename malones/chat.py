from __future__ import annotations

from .dialogue import DialogueSession
from .fallback_router import route_with_rules
from .models import ChatResponse
from .utils import _trace


def _reprompt(session: DialogueSession) -> str:
    return f"Just yes or no. {session.start()}"


def reply_with_meta(text: str, session: DialogueSession, *, debug: bool = False) -> ChatResponse:
    """
    Classify a typed answer and feed it to the session.
    Must never raise for normal user input.
    """
    r = route_with_rules(text)

    meta = {}
    if debug:
        meta["answer"] = r.model_dump()
        meta["question_number"] = session.question_number

    _trace(
        debug,
        "answer.result",
        {
            "intent": r.intent,
            "matched": r.matched,
            "score": r.score,
            "question_number": session.question_number,
        },
    )

    if r.intent == "yes":
        return ChatResponse(text=session.yes(), meta=meta, finished=True)

    if r.intent == "no":
        was_last = session.is_last_question
        out = session.no()
        _trace(debug, "dialogue.no", {"question_number": session.question_number, "final": was_last})
        return ChatResponse(text=out, meta=meta, finished=was_last)

    return ChatResponse(text=_reprompt(session), meta=meta)


def reply(text: str, session: DialogueSession, *, debug: bool = False) -> str:
    return reply_with_meta(text, session, debug=debug).text

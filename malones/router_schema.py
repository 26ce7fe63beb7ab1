from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel

Intent = Literal["yes", "no", "unknown"]


class AnswerOutput(BaseModel):
    intent: Intent
    matched: Optional[str] = None  # vocabulary entry that decided it
    score: Optional[float] = None

from __future__ import annotations

from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAIN_COUNT = 5
MAIN_MAX = 50
STAR_COUNT = 2
STAR_MAX = 12


def _check_group(values: Tuple[int, ...], count: int, max_value: int, label: str) -> Tuple[int, ...]:
    if len(values) != count:
        raise ValueError(f"{label} must have {count} numbers, got {len(values)}")
    if len(set(values)) != count:
        raise ValueError(f"{label} numbers must be unique")
    if any(v < 1 or v > max_value for v in values):
        raise ValueError(f"{label} numbers must be between 1 and {max_value}")
    if list(values) != sorted(values):
        raise ValueError(f"{label} numbers must be in ascending order")
    return values


class Ticket(BaseModel):
    model_config = ConfigDict(frozen=True)

    main: Tuple[int, ...]  # 5 balls from 1..50
    stars: Tuple[int, ...]  # 2 lucky stars from 1..12

    @field_validator("main")
    @classmethod
    def _check_main(cls, v: Tuple[int, ...]) -> Tuple[int, ...]:
        return _check_group(v, MAIN_COUNT, MAIN_MAX, "main")

    @field_validator("stars")
    @classmethod
    def _check_stars(cls, v: Tuple[int, ...]) -> Tuple[int, ...]:
        return _check_group(v, STAR_COUNT, STAR_MAX, "stars")

    @property
    def numbers(self) -> List[int]:
        return [*self.main, *self.stars]


class DialogueScript(BaseModel):
    model_config = ConfigDict(frozen=True)

    questions: Tuple[str, ...]
    yes_reply: str
    no_reply: str  # given on "no" to the last question

    @field_validator("questions")
    @classmethod
    def _non_empty(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if not v:
            raise ValueError("a dialogue script needs at least one question")
        return v


class ChatResponse(BaseModel):
    text: str
    meta: Dict[str, Any] = Field(default_factory=dict)
    finished: bool = False

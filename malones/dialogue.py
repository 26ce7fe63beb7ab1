from __future__ import annotations

from typing import Optional, Tuple

from .models import DialogueScript

MALONES_SCRIPT = DialogueScript(
    questions=(
        "Should you come into Malones?",
        "Are you Irish?",
        "Do you want to be?",
        "Well, do you like music",
        "Pizza?",
        "Ice cream?",
        "Awesome service?",
    ),
    yes_reply="Well then come in so!",
    no_reply="Maybe a pint will cheer you up ya miserable git! Come in!",
)


class InvalidStateError(RuntimeError):
    """Raised when a session's cursor no longer points at a question."""


class DialogueSession:
    """
    One walk through the script.

    - start(): current question
    - yes(): the yes reply (cursor untouched)
    - no(): next question, or the final reply once on the last question

    Answering yes does not lock the session; start()/no() keep working from
    wherever the cursor is.
    """

    def __init__(self, script: DialogueScript = MALONES_SCRIPT) -> None:
        self.script = script
        self.question_number = 0

    @property
    def questions(self) -> Tuple[str, ...]:
        return self.script.questions

    @property
    def last_index(self) -> int:
        return len(self.script.questions) - 1

    @property
    def is_last_question(self) -> bool:
        return self.question_number == self.last_index

    def _check_state(self) -> None:
        if not self.script.questions:
            raise InvalidStateError("dialogue script has no questions")
        if not 0 <= self.question_number <= self.last_index:
            raise InvalidStateError(
                f"cursor {self.question_number} out of range 0..{self.last_index}"
            )

    def start(self) -> str:
        self._check_state()
        return self.script.questions[self.question_number]

    def yes(self) -> str:
        return self.script.yes_reply

    def no(self) -> str:
        self._check_state()
        if self.is_last_question:
            return self.script.no_reply
        self.question_number += 1
        return self.script.questions[self.question_number]

    answer_yes = yes
    answer_no = no

    def reset(self) -> None:
        self.question_number = 0


def create_session(script: Optional[DialogueScript] = None) -> DialogueSession:
    """Return a fresh, independent session (default: Malone's script)."""
    return DialogueSession(script or MALONES_SCRIPT)

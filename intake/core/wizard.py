"""
Triage wizard state machine.

Questions are walked strictly in order, one step at a time:
- advance only when the current question has an answer
- no wraparound, no jumping to an arbitrary step
- picking an answer records it at once; the follow-up move (advance, or
  classify on the last step) runs in settle(), which the UI calls after a
  short visual beat
- an answer that reveals a sub-field schedules no move; the user fills
  the sub-field and moves on with Next / Finish
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Tuple

from .classifier import classify
from .config import HiddenFieldPolicy
from .errors import InvalidAnswerError, SubFieldUnavailableError
from .questions import QUESTIONS
from .types import Answers, Direction, Question, WizardState

logger = logging.getLogger(__name__)

# settle() / handle_key() results
ADVANCED = "advanced"
FINALIZED = "finalized"
RETREATED = "retreated"

KEY_BACK = "ArrowLeft"
KEYS_FORWARD = ("ArrowRight", "Enter")


class TriageWizard:
    def __init__(
        self,
        questions: Tuple[Question, ...] = QUESTIONS,
        hidden_field_policy: HiddenFieldPolicy = HiddenFieldPolicy.RETAIN,
    ):
        if not questions:
            raise ValueError("TriageWizard needs at least one question")
        self.questions = tuple(questions)
        self.hidden_field_policy = hidden_field_policy
        self.state = WizardState()

    # -----------------------------
    # Read-only views
    # -----------------------------
    @property
    def current_step(self) -> int:
        return self.state.current_step

    @property
    def answers(self) -> Answers:
        return self.state.answers

    @property
    def direction(self) -> Direction:
        return self.state.direction

    @property
    def finalized(self) -> bool:
        return self.state.finalized

    @property
    def question_count(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> Question:
        return self.questions[self.state.current_step]

    @property
    def is_last_step(self) -> bool:
        return self.state.current_step == len(self.questions) - 1

    @property
    def can_advance(self) -> bool:
        return self.current_question.id in self.state.answers

    @property
    def can_retreat(self) -> bool:
        return self.state.current_step > 0

    @property
    def awaiting_settle(self) -> bool:
        return self.state.pending_step is not None

    @property
    def classification(self) -> Optional[str]:
        # Recomputed from the answers on every read; None until finalized
        if not self.state.finalized:
            return None
        return classify(self.state.answers)

    def selected_value(self, question: Optional[Question] = None) -> Optional[str]:
        q = question or self.current_question
        return self.state.answers.get(q.id)

    def sub_field_visible(self, question: Optional[Question] = None) -> bool:
        q = question or self.current_question
        if q.sub_field is None:
            return False
        return self.state.answers.get(q.id) == q.sub_field.trigger_value

    def sub_field_value(self, question: Optional[Question] = None) -> str:
        q = question or self.current_question
        if q.sub_field is None:
            return ""
        return self.state.answers.get(q.sub_field.key, "")

    def step_label(self) -> str:
        return f"Step {self.state.current_step + 1} of {len(self.questions)}"

    def percent_complete(self) -> int:
        # Half-up rounding (2.5 -> 3)
        return int(math.floor((self.state.current_step + 1) / len(self.questions) * 100 + 0.5))

    # -----------------------------
    # Navigation
    # -----------------------------
    def advance(self) -> bool:
        if self.state.finalized or not self.can_advance or self.is_last_step:
            return False
        self.state.pending_step = None
        self.state.direction = Direction.FORWARD
        self.state.current_step += 1
        return True

    def retreat(self) -> bool:
        if self.state.finalized or not self.can_retreat:
            return False
        self.state.pending_step = None
        self.state.direction = Direction.BACKWARD
        self.state.current_step -= 1
        return True

    def finalize(self) -> bool:
        """Classify once the last question is answered. No-op otherwise."""
        if self.state.finalized or not self.is_last_step or not self.can_advance:
            return False
        self.state.finalized = True
        self.state.pending_step = None
        logger.info("Triage finalized: classification=%s", self.classification)
        return True

    def handle_key(self, key: str) -> Optional[str]:
        if key == KEY_BACK:
            return RETREATED if self.retreat() else None
        if key in KEYS_FORWARD:
            if self.is_last_step:
                return FINALIZED if self.finalize() else None
            return ADVANCED if self.advance() else None
        return None

    # -----------------------------
    # Answers
    # -----------------------------
    def select_answer(self, value: str) -> None:
        """
        Record the answer for the current question (overwrites any previous
        one) and mark the step as waiting for settle().
        """
        if self.state.finalized:
            return
        q = self.current_question
        if not q.has_option(value):
            raise InvalidAnswerError(q.id, value)

        self.state.answers[q.id] = value

        if (
            q.sub_field is not None
            and value != q.sub_field.trigger_value
            and self.hidden_field_policy == HiddenFieldPolicy.CLEAR
        ):
            self.state.answers.pop(q.sub_field.key, None)

        if self.sub_field_visible(q):
            self.state.pending_step = None
        else:
            self.state.pending_step = self.state.current_step

    def settle(self) -> Optional[str]:
        """
        Run the move scheduled by the last select_answer().
        Dropped if the user navigated off that step in the meantime.
        """
        pending = self.state.pending_step
        self.state.pending_step = None
        if pending is None or pending != self.state.current_step:
            return None
        if self.is_last_step:
            return FINALIZED if self.finalize() else None
        return ADVANCED if self.advance() else None

    def set_sub_field(self, value: str) -> None:
        if self.state.finalized:
            return
        q = self.current_question
        if not self.sub_field_visible(q):
            raise SubFieldUnavailableError(f"Question {q.id!r} has no visible sub-field")
        self.state.answers[q.sub_field.key] = value

    def start_over(self) -> None:
        self.state = WizardState()

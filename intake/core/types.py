from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


QuestionId = str
Answers = Dict[str, str]


@dataclass(frozen=True)
class AnswerOption:
    label: str
    value: str


@dataclass(frozen=True)
class SubField:
    key: str                      # stored in Answers under this key, not the parent id
    label: str
    trigger_value: str            # visible only while the parent answer equals this
    placeholder: str = ""


@dataclass(frozen=True)
class Question:
    id: QuestionId
    label: str
    options: Tuple[AnswerOption, ...]
    sub_field: Optional[SubField] = None

    def has_option(self, value: str) -> bool:
        return any(o.value == value for o in self.options)

    def option_values(self) -> List[str]:
        return [o.value for o in self.options]


class Direction(int, Enum):
    # Only drives the slide animation
    FORWARD = 1
    BACKWARD = -1


@dataclass
class WizardState:
    current_step: int = 0
    answers: Answers = field(default_factory=dict)
    direction: Direction = Direction.FORWARD

    # Step whose answer was just selected and is waiting for settle()
    pending_step: Optional[int] = None

    # Set once the last question has been answered and settled
    finalized: bool = False


@dataclass
class ContactSubmission:
    """RFD contact capture, created empty on entering the outcome view."""

    name: str = ""
    email: str = ""
    synopsis: str = ""
    screener_url: str = ""
    availability: str = ""
    platform_notes: str = ""
    company: str = ""


@dataclass
class DirectRequest:
    """Chooser-page distribution request (no triage in front of it)."""

    name: str = ""
    email: str = ""
    logline: str = ""
    link: str = ""


@dataclass(frozen=True)
class NotificationResult:
    ok: bool
    message_id: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, message_id: Optional[str] = None) -> "NotificationResult":
        return cls(ok=True, message_id=message_id)

    @classmethod
    def failure(cls, reason: str) -> "NotificationResult":
        return cls(ok=False, error=reason)

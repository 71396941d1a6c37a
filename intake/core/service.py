from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..notify.base import Notifier
from ..notify.intake import IntakeNotifier
from .chooser import ChooserFlow
from .config import IntakeConfig
from .outcome import OutcomeController
from .wizard import FINALIZED, TriageWizard

logger = logging.getLogger(__name__)

# NOTE:
# This module is the integration point for the UI.
# One IntakeSession per browser session; nothing is shared between sessions
# and nothing is persisted.

VIEW_WIZARD = "wizard"
VIEW_OUTCOME = "outcome"
VIEW_THANK_YOU = "thank_you"


@dataclass
class IntakeSession:
    config: IntakeConfig
    notifier: Notifier
    wizard: TriageWizard
    chooser: ChooserFlow
    outcome: Optional[OutcomeController] = None


# -----------------------------
# Sessions
# -----------------------------
def create_session(config: IntakeConfig, notifier: Optional[Notifier] = None) -> IntakeSession:
    notifier = notifier or IntakeNotifier(config)
    return IntakeSession(
        config=config,
        notifier=notifier,
        wizard=TriageWizard(hidden_field_policy=config.hidden_field_policy),
        chooser=ChooserFlow(notifier, originals_url=config.originals_submission_url),
    )


def _enter_outcome(session: IntakeSession) -> None:
    track = session.wizard.classification
    session.outcome = OutcomeController(
        track=track,
        answers=session.wizard.answers,
        notifier=session.notifier,
        originals_url=session.config.originals_submission_url,
        submit_gate=session.config.submit_gate,
    )


# -----------------------------
# Wizard events
# -----------------------------
def select_answer(session: IntakeSession, value: str) -> None:
    session.wizard.select_answer(value)


def settle(session: IntakeSession) -> Optional[str]:
    """Runs after the answer-selection beat (config.advance_delay_ms)."""
    action = session.wizard.settle()
    if action == FINALIZED:
        _enter_outcome(session)
    return action


def back(session: IntakeSession) -> bool:
    return session.wizard.retreat()


def key(session: IntakeSession, key_name: str) -> Optional[str]:
    if session.outcome is not None:
        return None
    action = session.wizard.handle_key(key_name)
    if action == FINALIZED:
        _enter_outcome(session)
    return action


def set_sub_field(session: IntakeSession, value: str) -> None:
    session.wizard.set_sub_field(value)


def submit_contact(session: IntakeSession) -> bool:
    if session.outcome is None:
        return False
    return session.outcome.submit_contact()


def start_over(session: IntakeSession) -> None:
    session.wizard.start_over()
    session.outcome = None
    logger.info("Session reset")


# -----------------------------
# Payload builder (what the UI renders)
# -----------------------------
def current_view(session: IntakeSession) -> str:
    if session.outcome is None:
        return VIEW_WIZARD
    if session.outcome.submitted:
        return VIEW_THANK_YOU
    return VIEW_OUTCOME


def build_payload(session: IntakeSession) -> Dict[str, Any]:
    w = session.wizard
    q = w.current_question
    payload: Dict[str, Any] = {
        "view": current_view(session),
        "step": w.current_step,
        "step_label": w.step_label(),
        "percent": w.percent_complete(),
        "direction": int(w.direction),
        "can_advance": w.can_advance,
        "awaiting_settle": w.awaiting_settle,
        "can_retreat": w.can_retreat,
        "is_last_step": w.is_last_step,
        "answers": dict(w.answers),
        "classification": w.classification,
        "question": {
            "id": q.id,
            "label": q.label,
            "options": [
                {"label": o.label, "value": o.value, "selected": w.selected_value() == o.value}
                for o in q.options
            ],
            "sub_field": None,
        },
        "outcome": None,
    }

    if w.sub_field_visible():
        payload["question"]["sub_field"] = {
            "key": q.sub_field.key,
            "label": q.sub_field.label,
            "placeholder": q.sub_field.placeholder,
            "value": w.sub_field_value(),
        }

    o = session.outcome
    if o is not None:
        payload["outcome"] = {
            "track": o.track,
            "headline": o.headline,
            "message": o.message,
            "cta": o.cta,
            "rights_note": o.rights_note,
            "submitted": o.submitted,
            "reference": o.reference,
            "form": None,
        }
        if o.form is not None:
            payload["outcome"]["form"] = {
                "values": {
                    "name": o.form.submission.name,
                    "email": o.form.submission.email,
                    "synopsis": o.form.submission.synopsis,
                    "screener_url": o.form.submission.screener_url,
                    "availability": o.form.submission.availability,
                    "platform_notes": o.form.submission.platform_notes,
                    "company": o.form.submission.company,
                },
                "errors": dict(o.form.errors),
                "platform_notes_visible": o.form.platform_notes_visible,
                "can_submit": o.form.can_submit,
                "synopsis_count": len(o.form.submission.synopsis),
            }
    return payload

"""
Outcome view after triage.

original -> one outbound call-to-action, no local validation
rfd      -> secondary contact form whose submit notifies the internal team

Delivery policy: with confirm_on_failure=True (the default) the user always
lands on the thank-you state, and a failed notification is only logged.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, Mapping, Optional

from ..notify.base import Notifier
from .classifier import needs_rights_note
from .config import SubmitGate
from .constants import (
    CTA_HELPER,
    CTA_LABEL,
    ORIGINAL_HEADLINE,
    ORIGINAL_MESSAGE,
    RFD_HEADLINE,
    RFD_MESSAGE,
    RIGHTS_NOTE,
    TRACK_ORIGINAL,
    TRACK_RFD,
)
from .forms import RfdContactForm
from .types import NotificationResult

logger = logging.getLogger(__name__)


def make_reference(clock: Callable[[], float] = time.time) -> str:
    """Display reference for the thank-you state, e.g. RFD-482913."""
    return "RFD-" + str(int(clock() * 1000))[-6:]


def deliver(notifier: Notifier, payload: Dict[str, Any], source: str) -> NotificationResult:
    """
    Call the notifier and report the outcome; never raises.
    A notifier that blows up counts as a failed delivery.
    """
    try:
        result = notifier.send(payload)
    except Exception as e:
        logger.exception("%s submission error", source)
        return NotificationResult.failure(str(e) or e.__class__.__name__)

    if result.ok:
        logger.info("%s submission sent (id=%s)", source, result.message_id)
    else:
        logger.warning("%s submission failed: %s", source, result.error)
    return result


class OutcomeController:
    def __init__(
        self,
        track: str,
        answers: Mapping[str, str],
        notifier: Notifier,
        originals_url: str,
        submit_gate: SubmitGate = SubmitGate.NON_EMPTY,
        confirm_on_failure: bool = True,
        clock: Callable[[], float] = time.time,
    ):
        if track not in (TRACK_ORIGINAL, TRACK_RFD):
            raise ValueError(f"Unknown track: {track!r}")
        self.track = track
        self.answers = dict(answers)
        self.notifier = notifier
        self.originals_url = originals_url
        self.confirm_on_failure = confirm_on_failure
        self._clock = clock

        self.form: Optional[RfdContactForm] = RfdContactForm(submit_gate) if track == TRACK_RFD else None
        self.submitted = False
        self.reference: Optional[str] = None
        self.last_result: Optional[NotificationResult] = None

    @property
    def is_rfd(self) -> bool:
        return self.track == TRACK_RFD

    @property
    def headline(self) -> str:
        return RFD_HEADLINE if self.is_rfd else ORIGINAL_HEADLINE

    @property
    def message(self) -> str:
        return RFD_MESSAGE if self.is_rfd else ORIGINAL_MESSAGE

    @property
    def cta(self) -> Optional[Dict[str, str]]:
        if self.is_rfd:
            return None
        return {"label": CTA_LABEL, "url": self.originals_url, "helper": CTA_HELPER}

    @property
    def rights_note(self) -> Optional[str]:
        if self.is_rfd or not needs_rights_note(self.answers):
            return None
        return RIGHTS_NOTE

    def submit_contact(self) -> bool:
        """
        Validate, notify, and move to the thank-you state.
        Returns True when the thank-you state is shown.
        """
        form = self.form
        if form is None or form.in_flight:
            return False
        if not form.validate():
            return False

        form.in_flight = True
        try:
            self.last_result = deliver(self.notifier, form.build_payload(self.answers), "RFD contact")
        finally:
            form.in_flight = False

        if self.last_result.ok or self.confirm_on_failure:
            self.submitted = True
            self.reference = make_reference(self._clock)
        return self.submitted

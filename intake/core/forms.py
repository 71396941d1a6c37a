"""
Contact forms.

Errors are field-local: editing a field clears its message, but the value is
only re-checked on the next submit attempt. Whether the submit control is
enabled is a separate, swappable predicate (see SUBMIT_GATES).
"""

from __future__ import annotations

from dataclasses import asdict, fields
from typing import Any, Callable, Dict, Mapping, Optional

from .config import SubmitGate
from .constants import (
    AVAILABILITY_OTHER_PLATFORMS,
    MSG_AVAILABILITY_REQUIRED,
    MSG_EMAIL_INVALID,
    MSG_EMAIL_REQUIRED,
    MSG_NAME_REQUIRED,
    MSG_SCREENER_INVALID,
    MSG_SCREENER_REQUIRED,
    MSG_SYNOPSIS_REQUIRED,
    MSG_SYNOPSIS_TOO_LONG,
    MSG_SYNOPSIS_TOO_SHORT,
    SYNOPSIS_MAX,
    SYNOPSIS_MIN,
    TRACK_RFD,
)
from .questions import AVAILABILITY_VALUES
from .types import ContactSubmission, DirectRequest
from .validation import (
    char_len,
    has_http_prefix,
    is_blank,
    is_parseable_url,
    is_valid_email,
    is_valid_email_strict,
    within_length,
)

REQUIRED_CONTACT_FIELDS = ("name", "email", "synopsis", "screener_url", "availability")


# -----------------------------
# RFD contact form (after triage)
# -----------------------------
def validate_contact(sub: ContactSubmission) -> Dict[str, str]:
    errors: Dict[str, str] = {}

    if is_blank(sub.name):
        errors["name"] = MSG_NAME_REQUIRED

    if is_blank(sub.email):
        errors["email"] = MSG_EMAIL_REQUIRED
    elif not is_valid_email(sub.email):
        errors["email"] = MSG_EMAIL_INVALID

    if is_blank(sub.synopsis):
        errors["synopsis"] = MSG_SYNOPSIS_REQUIRED
    elif not within_length(sub.synopsis, SYNOPSIS_MIN, SYNOPSIS_MAX):
        too_short = char_len(sub.synopsis) < SYNOPSIS_MIN
        errors["synopsis"] = MSG_SYNOPSIS_TOO_SHORT if too_short else MSG_SYNOPSIS_TOO_LONG

    if is_blank(sub.screener_url):
        errors["screener_url"] = MSG_SCREENER_REQUIRED
    elif not is_parseable_url(sub.screener_url):
        errors["screener_url"] = MSG_SCREENER_INVALID

    if sub.availability not in AVAILABILITY_VALUES:
        errors["availability"] = MSG_AVAILABILITY_REQUIRED

    return errors


def required_filled(sub: ContactSubmission) -> bool:
    return all(not is_blank(getattr(sub, f)) for f in REQUIRED_CONTACT_FIELDS)


def all_valid(sub: ContactSubmission) -> bool:
    return not validate_contact(sub)


SUBMIT_GATES: Dict[SubmitGate, Callable[[ContactSubmission], bool]] = {
    SubmitGate.NON_EMPTY: required_filled,
    SubmitGate.ALL_VALID: all_valid,
}


class RfdContactForm:
    def __init__(self, submit_gate: SubmitGate = SubmitGate.NON_EMPTY):
        self.submission = ContactSubmission()
        self.errors: Dict[str, str] = {}
        self.in_flight = False
        self._gate = SUBMIT_GATES[submit_gate]

    _FIELDS = tuple(f.name for f in fields(ContactSubmission))

    def update(self, field_name: str, value: str) -> None:
        if field_name not in self._FIELDS:
            raise KeyError(field_name)
        setattr(self.submission, field_name, value)
        # clear on edit, re-check on next submit
        self.errors.pop(field_name, None)

    def error_for(self, field_name: str) -> Optional[str]:
        return self.errors.get(field_name)

    @property
    def platform_notes_visible(self) -> bool:
        return self.submission.availability == AVAILABILITY_OTHER_PLATFORMS

    @property
    def can_submit(self) -> bool:
        return not self.in_flight and self._gate(self.submission)

    def validate(self) -> bool:
        self.errors = validate_contact(self.submission)
        return not self.errors

    def build_payload(self, answers: Mapping[str, str]) -> Dict[str, Any]:
        s = self.submission
        payload: Dict[str, Any] = dict(answers)
        payload.update(
            {
                "name": s.name.strip(),
                "email": s.email.strip(),
                "synopsis": s.synopsis.strip(),
                "screenerUrl": s.screener_url.strip(),
                "availability": s.availability,
                "classification": TRACK_RFD,
            }
        )
        if s.platform_notes.strip():
            payload["platformNotes"] = s.platform_notes.strip()
        if s.company.strip():
            payload["company"] = s.company.strip()
        return payload

    def reset(self) -> None:
        self.submission = ContactSubmission()
        self.errors = {}
        self.in_flight = False


# -----------------------------
# Direct request form (chooser page)
# -----------------------------
class DirectRequestForm:
    """
    Live-validated form: the submit control stays disabled until every
    field is valid, unlike the RFD contact form.
    """

    def __init__(self):
        self.request = DirectRequest()

    def update(self, field_name: str, value: str) -> None:
        if not hasattr(self.request, field_name):
            raise KeyError(field_name)
        setattr(self.request, field_name, value)

    @property
    def email_ok(self) -> bool:
        return is_valid_email_strict(self.request.email)

    @property
    def link_ok(self) -> bool:
        return has_http_prefix(self.request.link)

    # Red border only once something was typed
    @property
    def email_flagged(self) -> bool:
        return bool(self.request.email) and not self.email_ok

    @property
    def link_flagged(self) -> bool:
        return bool(self.request.link) and not self.link_ok

    @property
    def ready(self) -> bool:
        r = self.request
        return (not is_blank(r.name)) and self.email_ok and (not is_blank(r.logline)) and self.link_ok

    def build_payload(self) -> Dict[str, str]:
        return asdict(self.request)

    def reset(self) -> None:
        self.request = DirectRequest()

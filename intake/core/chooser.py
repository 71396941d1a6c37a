from __future__ import annotations

from ..notify.base import Notifier
from .forms import DirectRequestForm
from .outcome import deliver

VIEW_CHOOSER = "chooser"
VIEW_FORM = "form"


class ChooserFlow:
    """
    "Choose Your Path" cards plus the direct distribution-request form.

    Same delivery policy as the triage outcome: once the form is ready, the
    user sees the thank-you state whether or not the notification went out.
    """

    def __init__(self, notifier: Notifier, originals_url: str, confirm_on_failure: bool = True):
        self.notifier = notifier
        self.originals_url = originals_url
        self.confirm_on_failure = confirm_on_failure
        self.form = DirectRequestForm()
        self.view = VIEW_CHOOSER
        self.submitted = False
        self.last_result = None

    @property
    def header(self) -> str:
        return "Request for Distribution" if self.view == VIEW_FORM else "Choose Your Path"

    def open_form(self) -> None:
        self.view = VIEW_FORM

    def back(self) -> None:
        self.form.reset()
        self.view = VIEW_CHOOSER

    def done(self) -> None:
        self.submitted = False
        self.form.reset()
        self.view = VIEW_CHOOSER

    def submit(self) -> bool:
        if self.view != VIEW_FORM or not self.form.ready:
            return False
        self.last_result = deliver(self.notifier, self.form.build_payload(), "Direct RFD")
        if self.last_result.ok or self.confirm_on_failure:
            self.submitted = True
            self.form.reset()
        return self.submitted

from __future__ import annotations

from typing import Any, Dict, List

import pytest

from intake.core.config import IntakeConfig
from intake.core.types import NotificationResult
from intake.notify.base import Notifier


class RecordingNotifier(Notifier):
    def __init__(self, result: NotificationResult = None, raises: Exception = None):
        self.result = result or NotificationResult.success("msg_123")
        self.raises = raises
        self.sent: List[Dict[str, Any]] = []

    def send(self, payload: Dict[str, Any]) -> NotificationResult:
        self.sent.append(payload)
        if self.raises is not None:
            raise self.raises
        return self.result


@pytest.fixture
def config() -> IntakeConfig:
    return IntakeConfig(advance_delay_ms=0, originals_submission_url="https://originals.example.com/submit")


@pytest.fixture
def provider_config() -> IntakeConfig:
    return IntakeConfig(
        resend_api_key="re_test",
        email_from="intake@example.com",
        notify_to="team@example.com",
    )


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def failing_notifier() -> RecordingNotifier:
    return RecordingNotifier(result=NotificationResult.failure("provider down"))


@pytest.fixture
def exploding_notifier() -> RecordingNotifier:
    return RecordingNotifier(raises=ConnectionError("connection refused"))


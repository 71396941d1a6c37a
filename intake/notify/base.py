"""Notification collaborator interface"""
from abc import ABC, abstractmethod
from typing import Any, Dict

from ..core.types import NotificationResult


class Notifier(ABC):
    """
    Sends one intake submission to the internal team.

    Implementations report the outcome as a NotificationResult and never
    decide what the user sees; that policy belongs to the caller.
    """

    @abstractmethod
    def send(self, payload: Dict[str, Any]) -> NotificationResult:
        pass

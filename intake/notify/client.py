from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from ..core.config import IntakeConfig
from ..core.types import NotificationResult

logger = logging.getLogger(__name__)


class ResendClient:
    """
    Thin e-mail provider client (Resend HTTP API).

    - POST {api_url} with a bearer key
    - 2xx => NotificationResult.success(<provider message id>)
    - non-2xx => NotificationResult.failure(<provider error message>)

    Transport errors (timeouts, DNS, refused connections) are raised as
    requests exceptions; the intake handler turns them into a 500 reply.
    """

    def __init__(self, api_key: str, api_url: str, timeout_sec: float = 15):
        if not api_key:
            raise ValueError("ResendClient requires an API key")
        self.api_key = api_key
        self.api_url = api_url.rstrip("/")
        self.timeout_sec = timeout_sec

    @classmethod
    def from_config(cls, config: IntakeConfig) -> "ResendClient":
        return cls(
            api_key=config.resend_api_key,
            api_url=config.resend_api_url,
            timeout_sec=config.resend_timeout_sec,
        )

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def send_email(
        self,
        *,
        sender: str,
        to: str,
        subject: str,
        html: str,
        text: str,
        reply_to: Optional[str] = None,
    ) -> NotificationResult:
        payload: Dict[str, Any] = {
            "from": sender,
            "to": [to],
            "subject": subject,
            "html": html,
            "text": text,
        }
        if reply_to:
            payload["reply_to"] = reply_to

        r = requests.post(
            self.api_url,
            json=payload,
            headers=self._headers(),
            timeout=self.timeout_sec,
        )

        try:
            data = r.json()
        except ValueError:
            data = {}

        if not r.ok:
            message = ""
            if isinstance(data, dict):
                message = str(data.get("message") or data.get("error") or "")
            return NotificationResult.failure(message or f"Resend HTTP {r.status_code}: {r.text[:500]}")

        message_id = data.get("id") if isinstance(data, dict) else None
        return NotificationResult.success(message_id)

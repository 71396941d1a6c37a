"""
RFD intake endpoint.

Handles one submission per call and answers with (status_code, body), body
being {"ok": bool, "id"?: str, "error"?: str}. Sends ONLY the internal
notification e-mail; the submitter gets no copy.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Dict, Mapping, Optional, Tuple

from ..core.config import IntakeConfig
from ..core.types import NotificationResult
from .base import Notifier
from .client import ResendClient
from .templates import generate_short_id, render_html, render_subject, render_text

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "email", "logline", "link")

Reply = Tuple[int, Dict[str, Any]]


def ping() -> Dict[str, Any]:
    logger.info("RFD intake ping")
    return {"ok": True, "ping": "pong"}


def handle_rfd_intake(
    data: Mapping[str, Any],
    config: IntakeConfig,
    client: Optional[ResendClient] = None,
    rng: Optional[random.Random] = None,
) -> Reply:
    logger.debug(
        "RFD intake: has_provider=%s email_from=%s notify_to=%s",
        config.has_provider,
        config.email_from,
        config.notify_to,
    )
    data = dict(data or {})
    short_id = generate_short_id(rng=rng)

    if any(not data.get(k) for k in REQUIRED_FIELDS):
        return 400, {"ok": False, "error": "Missing required fields"}

    if not config.has_provider and client is None:
        logger.info("RESEND_API_KEY not set, logging submission instead: %s", data)
        return 200, {"ok": True}

    try:
        client = client or ResendClient.from_config(config)
        result = client.send_email(
            sender=config.email_from,
            to=config.notify_to,
            subject=render_subject(short_id),
            html=render_html(data, short_id),
            text=render_text(data, short_id),
            reply_to=str(data["email"]),
        )
    except Exception:
        logger.exception("RFD intake error [%s]", short_id)
        return 500, {"ok": False, "error": "Failed to process submission"}

    if not result.ok:
        logger.error("Resend error [%s]: %s", short_id, result.error)
        return 500, {"ok": False, "error": result.error}

    logger.info("Resend ok [%s]: %s", short_id, result.message_id)
    return 200, {"ok": True, "id": result.message_id}


class IntakeNotifier(Notifier):
    """
    In-process caller of the intake endpoint.

    The triage contact form names its fields synopsis / screenerUrl; the
    endpoint expects logline / link.
    """

    def __init__(self, config: IntakeConfig, client: Optional[ResendClient] = None):
        self.config = config
        self.client = client

    @staticmethod
    def to_intake_data(payload: Mapping[str, Any]) -> Dict[str, Any]:
        data = dict(payload)
        if not data.get("logline") and data.get("synopsis"):
            data["logline"] = data["synopsis"]
        if not data.get("link") and data.get("screenerUrl"):
            data["link"] = data["screenerUrl"]
        return data

    def send(self, payload: Dict[str, Any]) -> NotificationResult:
        status, body = handle_rfd_intake(self.to_intake_data(payload), self.config, client=self.client)
        if body.get("ok"):
            return NotificationResult.success(body.get("id"))
        return NotificationResult.failure(str(body.get("error") or f"HTTP {status}"))

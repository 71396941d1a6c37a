from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum

from .errors import ConfigError


def env_bool(key: str, default: str = "0") -> bool:
    """
    Env bool parser.
    Accepts: 1/0, true/false, yes/no (case-insensitive)
    """
    v = os.getenv(key, default)
    if v is None:
        v = default
    return str(v).strip().lower() in ("1", "true", "yes", "y")


def env_str(key: str, default: str = "") -> str:
    v = os.getenv(key, default)
    if v is None:
        v = default
    return str(v).strip()


def env_int(key: str, default: str = "0") -> int:
    raw = env_str(key, default) or default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{key} must be an integer, got {raw!r}")


# -------------------------------------------------
# Policy switches
# -------------------------------------------------
class HiddenFieldPolicy(str, Enum):
    """What happens to a conditional sub-field value once it is hidden again."""

    RETAIN = "retain"
    CLEAR = "clear"


class SubmitGate(str, Enum):
    """Which predicate enables the RFD submit button."""

    NON_EMPTY = "non_empty"
    ALL_VALID = "all_valid"


def _parse_enum(enum_cls, key: str, default: str):
    raw = env_str(key, default).lower() or default
    try:
        return enum_cls(raw)
    except ValueError:
        allowed = ", ".join(e.value for e in enum_cls)
        raise ConfigError(f"{key}={raw!r} is not one of: {allowed}")


# -------------------------------------------------
# Config object (built once, injected everywhere)
# -------------------------------------------------
RESEND_API_URL = "https://api.resend.com/emails"
DEFAULT_EMAIL_FROM = "onboarding@resend.dev"
DEFAULT_NOTIFY_TO = "rfd-intake@example.com"
DEFAULT_ORIGINALS_URL = "https://example.com/originals-submission"


@dataclass(frozen=True)
class IntakeConfig:
    # Notification provider
    resend_api_key: str = ""
    resend_api_url: str = RESEND_API_URL
    resend_timeout_sec: int = 15
    email_from: str = DEFAULT_EMAIL_FROM
    notify_to: str = DEFAULT_NOTIFY_TO

    # Original track redirect target (never contacted)
    originals_submission_url: str = DEFAULT_ORIGINALS_URL

    # Wizard behaviour
    advance_delay_ms: int = 150
    hidden_field_policy: HiddenFieldPolicy = HiddenFieldPolicy.RETAIN
    submit_gate: SubmitGate = SubmitGate.NON_EMPTY

    # UI / logging
    log_level: str = "INFO"
    show_debug: bool = False

    @property
    def has_provider(self) -> bool:
        return bool(self.resend_api_key)

    @classmethod
    def from_env(cls) -> "IntakeConfig":
        """
        Snapshot of the process environment.
        Call once at startup and pass the result down; nothing below the
        Streamlit entrypoint reads os.environ directly.
        """
        delay = env_int("ADVANCE_DELAY_MS", "150")
        if delay < 0:
            raise ConfigError("ADVANCE_DELAY_MS must be >= 0")

        return cls(
            resend_api_key=env_str("RESEND_API_KEY", ""),
            resend_api_url=env_str("RESEND_API_URL", RESEND_API_URL).rstrip("/"),
            resend_timeout_sec=env_int("RESEND_TIMEOUT_SEC", "15"),
            email_from=env_str("EMAIL_FROM", "") or DEFAULT_EMAIL_FROM,
            notify_to=env_str("RFD_NOTIFY_TO", "") or DEFAULT_NOTIFY_TO,
            originals_submission_url=env_str("ORIGINALS_SUBMISSION_URL", "") or DEFAULT_ORIGINALS_URL,
            advance_delay_ms=delay,
            hidden_field_policy=_parse_enum(HiddenFieldPolicy, "HIDDEN_FIELD_POLICY", "retain"),
            submit_gate=_parse_enum(SubmitGate, "SUBMIT_GATE", "non_empty"),
            log_level=env_str("LOG_LEVEL", "INFO").upper() or "INFO",
            show_debug=env_bool("SHOW_DEBUG", "0"),
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

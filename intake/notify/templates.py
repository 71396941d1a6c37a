from __future__ import annotations

import html
import random
import string
from typing import Any, Dict, List, Optional

NOT_SPECIFIED = "Not specified"
FOOTER_SOURCE = "Submitted via Tubi RFD Intake Form"

_ALPHABET = string.digits + string.ascii_uppercase

# Optional extras appended under "Content Information" when present
_EXTRA_FIELDS = [
    ("availability", "Availability"),
    ("platformNotes", "Platforms"),
    ("company", "Company"),
]


def generate_short_id(length: int = 6, rng: Optional[random.Random] = None) -> str:
    """Short upper-case base-36 reference, e.g. "K3P9QZ"."""
    r = rng or random
    return "".join(r.choice(_ALPHABET) for _ in range(length))


def _v(data: Dict[str, Any], key: str) -> str:
    return str(data.get(key) or "").strip()


def render_subject(short_id: str) -> str:
    return f"RFD Distribution Request [{short_id}]"


def render_text(data: Dict[str, Any], short_id: str) -> str:
    lines: List[str] = []
    lines.append(f"New RFD Distribution Request [{short_id}]")
    lines.append("")
    lines.append("Submitter Information:")
    lines.append(f"Name: {_v(data, 'name')}")
    lines.append(f"Email: {_v(data, 'email')}")
    lines.append("")
    lines.append("Submission Details:")
    lines.append(f"Submission Type: {_v(data, 'submissionType') or NOT_SPECIFIED}")
    lines.append(f"Rights: {_v(data, 'rights') or NOT_SPECIFIED}")
    if _v(data, "territories"):
        lines.append(f"Territories: {_v(data, 'territories')}")
    lines.append("")
    lines.append("Content Information:")
    lines.append("Logline:")
    lines.append(str(data.get("logline") or ""))
    lines.append("")
    lines.append(f"Film/Series Link: {_v(data, 'link')}")
    for key, label in _EXTRA_FIELDS:
        if _v(data, key):
            lines.append(f"{label}: {_v(data, key)}")
    lines.append("")
    lines.append("---")
    lines.append(f"Submission ID: {short_id} | {FOOTER_SOURCE}")
    lines.append("")
    lines.append(f"Ref: {short_id}")
    return "\n".join(lines)


def render_html(data: Dict[str, Any], short_id: str) -> str:
    e = lambda key: html.escape(_v(data, key))  # noqa: E731
    logline = html.escape(str(data.get("logline") or "")).replace("\n", "<br>")
    link = e("link")

    parts: List[str] = []
    parts.append(f"<h2>New RFD Distribution Request [{short_id}]</h2>")
    parts.append("<h3>Submitter Information</h3>")
    parts.append(f"<p><strong>Name:</strong> {e('name')}</p>")
    parts.append(f"<p><strong>Email:</strong> {e('email')}</p>")
    parts.append("<h3>Submission Details</h3>")
    parts.append(f"<p><strong>Submission Type:</strong> {e('submissionType') or NOT_SPECIFIED}</p>")
    parts.append(f"<p><strong>Rights:</strong> {e('rights') or NOT_SPECIFIED}</p>")
    if _v(data, "territories"):
        parts.append(f"<p><strong>Territories:</strong> {e('territories')}</p>")
    parts.append("<h3>Content Information</h3>")
    parts.append("<p><strong>Logline:</strong></p>")
    parts.append(f"<p>{logline}</p>")
    parts.append(f'<p><strong>Film/Series Link:</strong> <a href="{link}" target="_blank">{link}</a></p>')
    for key, label in _EXTRA_FIELDS:
        if _v(data, key):
            parts.append(f"<p><strong>{label}:</strong> {e(key)}</p>")
    parts.append("<hr>")
    parts.append(f"<p><small>Submission ID: {short_id} | {FOOTER_SOURCE}</small></p>")
    parts.append(f'<p style="color:#666">Ref: {short_id}</p>')
    return "\n".join(parts)

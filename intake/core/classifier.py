from __future__ import annotations

from typing import Mapping

from .constants import (
    FINISHED,
    NO_UNSURE,
    RIGHTS,
    RIGHTS_HELD,
    SUBMISSION_TYPE,
    TRACK_ORIGINAL,
    TRACK_RFD,
)


def classify(answers: Mapping[str, str]) -> str:
    """
    Only a finished, ready-to-stream asset whose submitter holds the
    distribution rights (worldwide or limited) goes to RFD. Everything else,
    including unclear rights, goes to the Originals development intake.
    """
    if answers.get(SUBMISSION_TYPE) == FINISHED and answers.get(RIGHTS) in RIGHTS_HELD:
        return TRACK_RFD
    return TRACK_ORIGINAL


def needs_rights_note(answers: Mapping[str, str]) -> bool:
    return answers.get(SUBMISSION_TYPE) == FINISHED and answers.get(RIGHTS) == NO_UNSURE

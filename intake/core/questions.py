from __future__ import annotations

from typing import Tuple

from .constants import (
    AVAILABILITY_FESTIVALS,
    AVAILABILITY_NONE,
    AVAILABILITY_OTHER_PLATFORMS,
    FINISHED,
    IDEA,
    NO_UNSURE,
    RIGHTS,
    SUBMISSION_TYPE,
    TERRITORIES,
    TRAILER,
    WIP,
    YES_LIMITED,
    YES_WORLD,
)
from .types import AnswerOption, Question, SubField

# -------------------------------------------------
# Triage questions (walked strictly in this order)
# -------------------------------------------------
QUESTIONS: Tuple[Question, ...] = (
    Question(
        id=SUBMISSION_TYPE,
        label="What are you submitting?",
        options=(
            AnswerOption("Finished film/series (ready to stream)", FINISHED),
            AnswerOption("Work-in-progress / rough cut", WIP),
            AnswerOption("Idea / pitch / treatment", IDEA),
            AnswerOption("Trailer/teaser only", TRAILER),
        ),
    ),
    Question(
        id=RIGHTS,
        label="Do you own the distribution rights?",
        options=(
            AnswerOption("Yes — worldwide", YES_WORLD),
            AnswerOption("Yes — limited territories", YES_LIMITED),
            AnswerOption("No / not sure", NO_UNSURE),
        ),
        sub_field=SubField(
            key=TERRITORIES,
            label="Please specify territories",
            trigger_value=YES_LIMITED,
            placeholder="e.g., North America, Europe, Asia-Pacific",
        ),
    ),
)

# RFD follow-up: "Where is it currently available?"
AVAILABILITY_OPTIONS: Tuple[AnswerOption, ...] = (
    AnswerOption("Not available anywhere yet", AVAILABILITY_NONE),
    AnswerOption("Festivals / private screener only", AVAILABILITY_FESTIVALS),
    AnswerOption("Already on other platforms (AVOD/SVOD/TVOD)", AVAILABILITY_OTHER_PLATFORMS),
)

AVAILABILITY_VALUES = frozenset(o.value for o in AVAILABILITY_OPTIONS)


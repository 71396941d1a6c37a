import itertools

import pytest

from intake.core.classifier import classify, needs_rights_note
from intake.core.questions import QUESTIONS

SUBMISSION_TYPES = QUESTIONS[0].option_values()
RIGHTS = QUESTIONS[1].option_values()


@pytest.mark.parametrize("stype, rights", list(itertools.product(SUBMISSION_TYPES, RIGHTS)))
def test_truth_table(stype, rights):
    expected = "rfd" if stype == "finished" and rights in ("yes_world", "yes_limited") else "original"
    assert classify({"submissionType": stype, "rights": rights}) == expected


def test_missing_answers_are_original():
    assert classify({}) == "original"
    assert classify({"submissionType": "finished"}) == "original"


def test_territories_do_not_change_track():
    answers = {"submissionType": "finished", "rights": "yes_limited", "territories": "EU"}
    assert classify(answers) == "rfd"


def test_rights_note_only_for_finished_without_rights():
    assert needs_rights_note({"submissionType": "finished", "rights": "no_unsure"})
    assert not needs_rights_note({"submissionType": "idea", "rights": "no_unsure"})
    assert not needs_rights_note({"submissionType": "finished", "rights": "yes_world"})

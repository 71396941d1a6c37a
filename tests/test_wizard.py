import pytest

from intake.core.config import HiddenFieldPolicy
from intake.core.errors import InvalidAnswerError, SubFieldUnavailableError
from intake.core.types import Direction
from intake.core.wizard import ADVANCED, FINALIZED, RETREATED, TriageWizard


@pytest.fixture
def wizard():
    return TriageWizard()


def _answer(w, value):
    w.select_answer(value)
    return w.settle()


def test_starts_on_first_question(wizard):
    assert wizard.current_step == 0
    assert wizard.answers == {}
    assert wizard.current_question.id == "submissionType"
    assert wizard.classification is None


def test_advance_is_noop_without_answer(wizard):
    assert not wizard.can_advance
    assert wizard.advance() is False
    assert wizard.current_step == 0


def test_retreat_is_noop_at_first_step(wizard):
    assert wizard.retreat() is False
    assert wizard.current_step == 0
    assert wizard.direction == Direction.FORWARD


def test_selecting_records_immediately_and_advances_on_settle(wizard):
    wizard.select_answer("finished")
    assert wizard.answers == {"submissionType": "finished"}
    assert wizard.current_step == 0
    assert wizard.settle() == ADVANCED
    assert wizard.current_step == 1
    assert wizard.direction == Direction.FORWARD


def test_settle_without_selection_does_nothing(wizard):
    assert wizard.settle() is None
    assert wizard.current_step == 0


def test_retreat_sets_backward_direction(wizard):
    _answer(wizard, "wip")
    assert wizard.retreat() is True
    assert wizard.current_step == 0
    assert wizard.direction == Direction.BACKWARD


def test_manual_advance_after_going_back(wizard):
    _answer(wizard, "wip")
    wizard.retreat()
    assert wizard.can_advance
    assert wizard.advance() is True
    assert wizard.current_step == 1


def test_advance_is_noop_on_last_step(wizard):
    _answer(wizard, "finished")
    wizard.select_answer("yes_world")
    assert wizard.advance() is False
    assert wizard.current_step == 1


def test_changing_answer_overwrites_only_that_id(wizard):
    _answer(wizard, "finished")
    wizard.select_answer("no_unsure")
    wizard.retreat()
    wizard.select_answer("idea")
    assert wizard.answers == {"submissionType": "idea", "rights": "no_unsure"}


def test_pending_move_dropped_after_navigating_away(wizard):
    _answer(wizard, "finished")
    wizard.select_answer("yes_world")
    wizard.retreat()
    assert wizard.settle() is None
    assert wizard.current_step == 0
    assert not wizard.finalized


def test_last_answer_finalizes_and_classifies(wizard):
    _answer(wizard, "finished")
    assert _answer(wizard, "yes_world") == FINALIZED
    assert wizard.finalized
    assert wizard.classification == "rfd"


def test_navigation_frozen_after_finalize(wizard):
    _answer(wizard, "idea")
    _answer(wizard, "no_unsure")
    assert wizard.retreat() is False
    wizard.select_answer("yes_world")
    assert wizard.answers["rights"] == "no_unsure"


def test_unknown_option_rejected(wizard):
    with pytest.raises(InvalidAnswerError):
        wizard.select_answer("documentary")
    assert wizard.answers == {}


# -----------------------------
# Keyboard
# -----------------------------
def test_keys(wizard):
    assert wizard.handle_key("ArrowRight") is None
    wizard.select_answer("trailer")
    assert wizard.handle_key("Enter") == ADVANCED
    assert wizard.handle_key("ArrowLeft") == RETREATED
    assert wizard.handle_key("ArrowRight") == ADVANCED
    assert wizard.handle_key("Tab") is None
    assert wizard.handle_key("Enter") is None  # rights not answered yet
    wizard.select_answer("no_unsure")
    assert wizard.handle_key("ArrowRight") == FINALIZED
    assert wizard.classification == "original"


# -----------------------------
# Conditional sub-field
# -----------------------------
def test_sub_field_visible_only_on_trigger(wizard):
    _answer(wizard, "finished")
    assert not wizard.sub_field_visible()
    for value, visible in [("yes_world", False), ("yes_limited", True), ("no_unsure", False)]:
        wizard.select_answer(value)
        assert wizard.sub_field_visible() is visible


def test_sub_field_value_stored_under_own_key(wizard):
    _answer(wizard, "finished")
    wizard.select_answer("yes_limited")
    wizard.set_sub_field("EU")
    assert wizard.answers == {"submissionType": "finished", "rights": "yes_limited", "territories": "EU"}


def test_hidden_sub_field_value_is_retained(wizard):
    _answer(wizard, "finished")
    wizard.select_answer("yes_limited")
    wizard.set_sub_field("EU, LATAM")
    wizard.select_answer("yes_world")
    assert not wizard.sub_field_visible()
    assert wizard.answers["territories"] == "EU, LATAM"
    wizard.select_answer("yes_limited")
    assert wizard.sub_field_value() == "EU, LATAM"


def test_clear_policy_drops_hidden_sub_field():
    w = TriageWizard(hidden_field_policy=HiddenFieldPolicy.CLEAR)
    _answer(w, "finished")
    w.select_answer("yes_limited")
    w.set_sub_field("EU")
    w.select_answer("no_unsure")
    assert "territories" not in w.answers


def test_trigger_answer_waits_for_sub_field(wizard):
    _answer(wizard, "finished")
    wizard.select_answer("yes_limited")
    assert not wizard.awaiting_settle
    assert wizard.settle() is None
    assert not wizard.finalized
    wizard.set_sub_field("EU")
    assert wizard.handle_key("Enter") == FINALIZED
    assert wizard.answers["territories"] == "EU"


def test_non_trigger_answer_still_auto_advances(wizard):
    _answer(wizard, "finished")
    wizard.select_answer("yes_world")
    assert wizard.awaiting_settle
    assert wizard.settle() == FINALIZED


def test_sub_field_ignored_after_finalize(wizard):
    _answer(wizard, "finished")
    wizard.select_answer("yes_limited")
    wizard.handle_key("Enter")
    wizard.set_sub_field("EU")
    assert "territories" not in wizard.answers


def test_sub_field_cannot_be_set_while_hidden(wizard):
    with pytest.raises(SubFieldUnavailableError):
        wizard.set_sub_field("EU")


# -----------------------------
# Progress + reset
# -----------------------------
def test_progress_outputs(wizard):
    assert wizard.step_label() == "Step 1 of 2"
    assert wizard.percent_complete() == 50
    _answer(wizard, "finished")
    assert wizard.step_label() == "Step 2 of 2"
    assert wizard.percent_complete() == 100


def test_start_over_resets_everything(wizard):
    _answer(wizard, "finished")
    wizard.select_answer("yes_limited")
    wizard.set_sub_field("EU")
    wizard.settle()
    wizard.start_over()
    assert wizard.current_step == 0
    assert wizard.answers == {}
    assert not wizard.finalized
    assert wizard.classification is None

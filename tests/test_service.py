import logging

from intake.core import service
from intake.core.types import NotificationResult
from intake.notify.intake import IntakeNotifier

SYNOPSIS_500 = "A" * 500


def _walk(session, *answers):
    for value in answers:
        service.select_answer(session, value)
        service.settle(session)


def test_scenario_idea_goes_to_originals_cta(config, notifier):
    s = service.create_session(config, notifier)
    _walk(s, "idea", "yes_world")
    p = service.build_payload(s)
    assert p["view"] == "outcome"
    assert p["classification"] == "original"
    assert p["outcome"]["cta"]["url"] == "https://originals.example.com/submit"
    assert p["outcome"]["rights_note"] is None
    assert p["outcome"]["form"] is None


def test_scenario_finished_without_rights_shows_note(config, notifier):
    s = service.create_session(config, notifier)
    _walk(s, "finished", "no_unsure")
    p = service.build_payload(s)
    assert p["classification"] == "original"
    assert p["outcome"]["cta"] is not None
    assert "rightsholder" in p["outcome"]["rights_note"]


def test_scenario_limited_rights_rfd_confirms_even_when_notification_fails(config, failing_notifier, caplog):
    s = service.create_session(config, failing_notifier)
    service.select_answer(s, "finished")
    service.settle(s)
    service.select_answer(s, "yes_limited")
    # territories input shows up; no auto-move while it is unfilled
    assert service.build_payload(s)["awaiting_settle"] is False
    assert service.settle(s) is None
    service.set_sub_field(s, "EU")
    assert service.key(s, "Enter") == "finalized"
    assert s.outcome.answers["territories"] == "EU"

    p = service.build_payload(s)
    assert p["classification"] == "rfd"
    assert p["outcome"]["form"]["can_submit"] is False

    form = s.outcome.form
    form.update("name", "Ada")
    form.update("email", "ada@example.com")
    form.update("synopsis", SYNOPSIS_500)
    form.update("screener_url", "https://vimeo.com/42")
    form.update("availability", "festivals")
    assert service.build_payload(s)["outcome"]["form"]["can_submit"] is True

    with caplog.at_level(logging.WARNING):
        assert service.submit_contact(s) is True

    p = service.build_payload(s)
    assert p["view"] == "thank_you"
    assert p["outcome"]["reference"].startswith("RFD-")
    assert failing_notifier.sent[0]["territories"] == "EU"
    assert "provider down" in caplog.text


def test_rfd_with_default_notifier_and_no_provider_confirms(config):
    s = service.create_session(config)
    assert isinstance(s.notifier, IntakeNotifier)
    _walk(s, "finished", "yes_world")
    form = s.outcome.form
    for k, v in {
        "name": "Ada",
        "email": "ada@example.com",
        "synopsis": SYNOPSIS_500,
        "screener_url": "https://vimeo.com/42",
        "availability": "none",
    }.items():
        form.update(k, v)
    assert service.submit_contact(s) is True
    assert s.outcome.last_result == NotificationResult.success(None)


def test_keyboard_finalize_enters_outcome(config, notifier):
    s = service.create_session(config, notifier)
    service.select_answer(s, "finished")
    assert service.key(s, "Enter") == "advanced"
    service.select_answer(s, "yes_world")
    assert service.key(s, "ArrowRight") == "finalized"
    assert s.outcome is not None and s.outcome.is_rfd
    assert service.key(s, "ArrowLeft") is None


def test_payload_tracks_wizard_position(config, notifier):
    s = service.create_session(config, notifier)
    p = service.build_payload(s)
    assert (p["view"], p["step_label"], p["percent"]) == ("wizard", "Step 1 of 2", 50)
    assert p["can_advance"] is False and p["can_retreat"] is False
    assert [o["value"] for o in p["question"]["options"]] == ["finished", "wip", "idea", "trailer"]

    service.select_answer(s, "finished")
    p = service.build_payload(s)
    assert [o["selected"] for o in p["question"]["options"]] == [True, False, False, False]

    service.settle(s)
    service.select_answer(s, "yes_limited")
    p = service.build_payload(s)
    assert p["question"]["sub_field"]["key"] == "territories"
    assert p["step_label"] == "Step 2 of 2"
    assert p["percent"] == 100


def test_start_over_after_thank_you(config, notifier):
    s = service.create_session(config, notifier)
    _walk(s, "finished", "yes_world")
    form = s.outcome.form
    for k, v in {
        "name": "Ada",
        "email": "ada@example.com",
        "synopsis": SYNOPSIS_500,
        "screener_url": "https://vimeo.com/42",
        "availability": "none",
    }.items():
        form.update(k, v)
    service.submit_contact(s)

    service.start_over(s)
    p = service.build_payload(s)
    assert p["view"] == "wizard"
    assert p["step"] == 0
    assert p["answers"] == {}
    assert p["classification"] is None
    assert p["outcome"] is None


def test_start_over_from_originals_outcome(config, notifier):
    s = service.create_session(config, notifier)
    _walk(s, "wip", "no_unsure")
    service.start_over(s)
    assert s.wizard.current_step == 0
    assert s.wizard.answers == {}
    assert s.outcome is None

"""Tests for building Datadog events."""

import json

import pytest

from ld_datadog.exceptions import DecodeError, MissingAccessError
from ld_datadog.models import Access, ChangeNotification, Member, decode_change_notification
from ld_datadog.models.datadog_event import DatadogEvent
from ld_datadog.processors.event_builder import build_event

def test_creates_event(payload):
    event = build_event(decode_change_notification(payload))

    assert event.to_dict() == {
        "title": "Reese Applebaum changed the name of Testing",
        "text": "- Changed the name from ~~Test~~ to *Testing*",
        "tags": ["kind:environment", "name:Testing", "action:updateName"],
        "source_type_name": "launch-darkly"
    }

def test_serializes_to_datadog_json(payload):
    event = build_event(decode_change_notification(payload))
    expected = (
        '{"title": "Reese Applebaum changed the name of Testing", '
        '"text": "- Changed the name from ~~Test~~ to *Testing*", '
        '"tags": ["kind:environment", "name:Testing", "action:updateName"], '
        '"source_type_name": "launch-darkly"}'
    )
    assert json.dumps(event.to_dict()) == expected

def test_only_first_access_is_tagged(flag_payload):
    event = build_event(decode_change_notification(flag_payload))

    assert event.title == "Reese Applebaum turned on the flag Dark mode"
    assert event.tags == ("kind:flag", "name:Dark mode", "action:updateOn")

def test_build_is_deterministic(payload):
    notification = decode_change_notification(payload)
    assert build_event(notification) == build_event(notification)

def test_missing_access_fails_explicitly():
    notification = ChangeNotification(
        kind="flag",
        name="Dark mode",
        description="- Turned on flag",
        title_verb="turned on the flag",
        member=Member(first_name="Reese", last_name="Applebaum"),
        accesses=[]
    )

    with pytest.raises(MissingAccessError, match="missing access entry"):
        build_event(notification)

def test_missing_access_is_a_decode_error():
    assert issubclass(MissingAccessError, DecodeError)

def test_description_is_copied_verbatim():
    description = "* Added rule\n* `value` -> **true**"
    notification = ChangeNotification(
        kind="flag",
        name="beta",
        description=description,
        title_verb="updated the flag",
        member=Member(first_name="Ada", last_name="Lovelace"),
        accesses=[Access(action="updateRules")]
    )

    assert build_event(notification).text == description

def test_event_defaults_source_type():
    assert DatadogEvent(title="t", text="x").source_type_name == "launch-darkly"

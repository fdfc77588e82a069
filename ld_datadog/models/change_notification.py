"""LaunchDarkly change notification model.

Only the fields needed to build a Datadog event are declared; everything else
LaunchDarkly sends is ignored so new webhook fields never break decoding.
See https://docs.launchdarkly.com/home/connecting/webhooks#webhook-payloads
"""

import logging
from typing import List

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from ..exceptions import DecodeError

logger = logging.getLogger(__name__)

class _WireModel(BaseModel):
    """Strict, immutable model reading camelCase wire names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        strict=True,
        frozen=True,
        extra='ignore'
    )

class Member(_WireModel):
    """The LaunchDarkly member who made the change."""

    first_name: str
    last_name: str

class Access(_WireModel):
    """One access-control action performed by the change, e.g. 'updateName'."""

    action: str

class ChangeNotification(_WireModel):
    """
    A decoded LaunchDarkly webhook payload.

    Fields:
        kind: Kind of resource that changed ('flag', 'environment', 'project', ...)
        name: Name of the resource
        description: Markdown summary of the change
        title_verb: Action phrase, e.g. 'changed the name of'
        member: Who made the change
        accesses: Actions the change performed, in the order LaunchDarkly lists them
    """

    kind: str
    name: str
    description: str
    title_verb: str
    member: Member
    accesses: List[Access]

def _summarize(error: ValidationError) -> str:
    """Compact, single line description of a validation failure."""
    problems = []
    for item in error.errors():
        location = '.'.join(str(part) for part in item['loc']) or '<body>'
        problems.append(f"{location}: {item['msg']}")
    return '; '.join(problems)

def decode_change_notification(raw_body: bytes) -> ChangeNotification:
    """
    Decode a raw webhook body into a ChangeNotification.

    Args:
        raw_body: JSON bytes exactly as received

    Returns:
        ChangeNotification: The decoded payload

    Raises:
        DecodeError: If the body is not JSON or lacks a required field
    """
    try:
        return ChangeNotification.model_validate_json(raw_body)
    except ValidationError as e:
        raise DecodeError(f"Invalid change notification: {_summarize(e)}") from e

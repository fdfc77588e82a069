"""Datadog event model."""

from typing import Dict, Any, Tuple
from dataclasses import dataclass

# Shown as the event source in Datadog
SOURCE_TYPE_NAME = "launch-darkly"

@dataclass(frozen=True)
class DatadogEvent:
    """
    Event document for the Datadog events API.

    Fields:
        title: Event title
        text: Event body, markdown allowed
        tags: 'key:value' tags in the order they are sent
        source_type_name: Integration the event originates from
    """
    title: str
    text: str
    tags: Tuple[str, ...] = ()
    source_type_name: str = SOURCE_TYPE_NAME

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to the JSON body Datadog expects."""
        return {
            'title': self.title,
            'text': self.text,
            'tags': list(self.tags),
            'source_type_name': self.source_type_name,
        }

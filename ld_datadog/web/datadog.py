import logging
from dataclasses import dataclass
from typing import Optional

import requests
from urllib3.exceptions import LocationValueError

from ..exceptions import PublishError
from ..models.datadog_event import DatadogEvent

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class PublishResult:
    """Outcome of a single publish attempt."""
    ok: bool
    status_code: Optional[int] = None
    error: Optional[str] = None

class DatadogEventPublisher:
    """Client for posting events to the Datadog events API."""

    def __init__(
        self,
        events_url: str,
        api_key: str,
        session: Optional[requests.Session] = None
    ):
        """
        Args:
            events_url: Datadog event ingestion endpoint
            api_key: Datadog API key, sent as the api_key query parameter
            session: Session to send through. Without one every event goes
                out on its own connection, so a publisher shared between
                worker threads never shares a Session.
        """
        self.events_url = events_url
        self._api_key = api_key
        self.session = session

    def __repr__(self) -> str:
        return f"DatadogEventPublisher(events_url={self.events_url!r})"

    def _post(self, event: DatadogEvent) -> requests.Response:
        """
        Send the event and return the response.

        Raises:
            PublishError: If the request fails or Datadog does not accept the event
        """
        try:
            # No timeout: delivery is bounded by the hosting runtime's request timeout
            post = self.session.post if self.session is not None else requests.post
            response = post(
                self.events_url,
                params={'api_key': self._api_key},
                json=event.to_dict()
            )
            response.raise_for_status()
        except requests.HTTPError as e:
            raise PublishError(
                f"Datadog rejected event with status {e.response.status_code}"
            ) from e
        except (requests.RequestException, LocationValueError) as e:
            # Exception text may embed the full URL, api_key included
            raise PublishError(f"Request to Datadog failed: {type(e).__name__}") from e
        return response

    def publish(self, event: DatadogEvent) -> PublishResult:
        """
        Post an event to Datadog, best effort.

        Failures are reported in the returned result rather than raised so the
        caller decides what to do with them.

        Args:
            event: Event to record

        Returns:
            PublishResult: Whether Datadog accepted the event
        """
        try:
            response = self._post(event)
        except PublishError as e:
            status_code = None
            cause = e.__cause__
            if isinstance(cause, requests.HTTPError) and cause.response is not None:
                status_code = cause.response.status_code
            return PublishResult(ok=False, status_code=status_code, error=str(e))

        logger.debug(f"Datadog accepted event '{event.title}' with status {response.status_code}")
        return PublishResult(ok=True, status_code=response.status_code)

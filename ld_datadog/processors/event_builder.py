"""Builds Datadog events from LaunchDarkly change notifications."""

from ..exceptions import MissingAccessError
from ..models.change_notification import ChangeNotification
from ..models.datadog_event import DatadogEvent, SOURCE_TYPE_NAME

def build_event(notification: ChangeNotification) -> DatadogEvent:
    """
    Map a change notification onto a Datadog event.

    The title reads like the LaunchDarkly audit log entry, e.g.
    "Reese Applebaum changed the name of Testing". Only the first access is
    tagged; later ones are summarized by it.

    Raises:
        MissingAccessError: If the notification carries no access entry
    """
    if not notification.accesses:
        raise MissingAccessError()

    member = notification.member
    title = ' '.join([
        member.first_name,
        member.last_name,
        notification.title_verb,
        notification.name
    ])

    return DatadogEvent(
        title=title,
        text=notification.description,
        tags=(
            f"kind:{notification.kind}",
            f"name:{notification.name}",
            f"action:{notification.accesses[0].action}"
        ),
        source_type_name=SOURCE_TYPE_NAME
    )

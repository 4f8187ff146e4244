"""Venue filter for CRM events."""

from __future__ import annotations

from collections.abc import Iterable

from src.umbraco_sync.events.schemas import CrmEvent

ONLINE_STATUS = "online"


def filter_events_by_venue(events: Iterable[CrmEvent], venue: str) -> list[CrmEvent]:
    """Return the online events held at ``venue``, in input order.

    Venue membership is exact; the website status comparison ignores case.
    """
    return [
        event
        for event in events
        if venue in event.event_venues and event.website_status.lower() == ONLINE_STATUS
    ]

"""Event records and the venue/reconciliation logic over them.

Provides CrmEvent/CmsEvent schemas, filter_events_by_venue() for selecting
live events at a venue, and compare_events() for deciding which CRM events
need a CMS create or update.
"""

from src.umbraco_sync.events.reconcile import compare_events, normalize_date_string
from src.umbraco_sync.events.schemas import (
    CmsEvent,
    CrmEvent,
    EventUpdate,
    SocialMedia,
    SyncPlan,
    SyncReport,
)
from src.umbraco_sync.events.venue import filter_events_by_venue

__all__ = [
    "CmsEvent",
    "CrmEvent",
    "EventUpdate",
    "SocialMedia",
    "SyncPlan",
    "SyncReport",
    "compare_events",
    "filter_events_by_venue",
    "normalize_date_string",
]

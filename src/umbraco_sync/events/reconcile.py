"""Reconciliation of CRM events against the events already in Umbraco.

Classifies each CRM event by identity and freshness marker:
- No CMS node with the same event id -> create
- CMS node found, lastUpdatedDate differs -> update
- CMS node found, lastUpdatedDate equal -> already in sync, dropped

CMS nodes with no CRM counterpart are never surfaced (no deletion).
"""

from __future__ import annotations

import re
from collections.abc import Iterable

import structlog

from src.umbraco_sync.events.schemas import CmsEvent, CrmEvent, EventUpdate, SyncPlan

logger = structlog.get_logger(__name__)

_QUOTED = re.compile(r'"(.*)"')


def normalize_date_string(value: str) -> str:
    """Strip one layer of surrounding double quotes, if both are present."""
    match = _QUOTED.fullmatch(value)
    return match.group(1) if match else value


def compare_events(
    crm_events: Iterable[CrmEvent],
    cms_events: Iterable[CmsEvent],
) -> SyncPlan:
    """Partition CRM events into create and update sets.

    Duplicate CMS event ids are not expected; if present the last one wins.
    Output order follows the CRM input order.

    Args:
        crm_events: Filtered CRM events (source of truth).
        cms_events: Events currently stored in Umbraco.

    Returns:
        SyncPlan with to_update pairs, to_create events and unchanged ids.
    """
    cms_by_id: dict[str, CmsEvent] = {}
    for cms_event in cms_events:
        cms_by_id[cms_event.event_id] = cms_event

    plan = SyncPlan()

    for crm_event in crm_events:
        event_id = str(crm_event.event_id)
        cms_event = cms_by_id.get(event_id)

        if cms_event is None:
            plan.to_create.append(crm_event)
            continue

        crm_marker = normalize_date_string(crm_event.last_updated_date)
        cms_marker = normalize_date_string(cms_event.last_updated_date)
        if crm_marker != cms_marker:
            plan.to_update.append(EventUpdate(cms_event=cms_event, crm_event=crm_event))
        else:
            plan.unchanged.append(event_id)

    logger.debug(
        "reconcile.complete",
        to_create=len(plan.to_create),
        to_update=len(plan.to_update),
        unchanged=len(plan.unchanged),
    )

    return plan

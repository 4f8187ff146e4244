"""One-way CRM -> Umbraco event sync.

Run order:
1. Fetch CRM events and current CMS event nodes
2. Keep online events at the target venue
3. Reconcile into create / update sets (unchanged events are skipped)
4. Map and push each event through the CMS gateway

The CMS is the only record of prior state; nothing is persisted here.
A failed create/update is logged and reported but does not stop the run,
and is not retried -- the next run picks the event up again because its
freshness marker was never written.
"""

from __future__ import annotations

import structlog

from src.umbraco_sync.events.reconcile import compare_events
from src.umbraco_sync.events.schemas import CrmEvent, EventUpdate, SyncReport
from src.umbraco_sync.events.venue import filter_events_by_venue
from src.umbraco_sync.sync.adapter import CmsGateway, CrmSource
from src.umbraco_sync.umbraco.mapper import DocumentMapper

logger = structlog.get_logger(__name__)


class SyncEngine:
    """Orchestrates a sync run between the CRM feed and Umbraco.

    Args:
        crm: CRM event source.
        cms: Umbraco gateway.
        mapper: Payload builder.
        venue: Only events at this venue are synced.
        parent_id: Parent node for created events; None lets the CMS decide.
        publish: Publish nodes after create/update.
    """

    def __init__(
        self,
        crm: CrmSource,
        cms: CmsGateway,
        mapper: DocumentMapper,
        venue: str,
        parent_id: str | None = None,
        publish: bool = True,
    ) -> None:
        self._crm = crm
        self._cms = cms
        self._mapper = mapper
        self._venue = venue
        self._parent_id = parent_id
        self._publish = publish

    async def run(self) -> SyncReport:
        """Execute one sync run.

        Fetch errors propagate; per-event write errors are collected.

        Returns:
            SyncReport with created/updated/unchanged counts and errors.
        """
        crm_events = await self._crm.fetch_events()
        cms_events = await self._cms.list_events()

        venue_events = filter_events_by_venue(crm_events, self._venue)
        plan = compare_events(venue_events, cms_events)

        logger.info(
            "sync.plan",
            venue=self._venue,
            crm_total=len(crm_events),
            venue_events=len(venue_events),
            to_create=len(plan.to_create),
            to_update=len(plan.to_update),
            unchanged=len(plan.unchanged),
        )

        report = SyncReport(unchanged=len(plan.unchanged))

        for crm_event in plan.to_create:
            try:
                await self._create(crm_event)
                report.created += 1
            except Exception as exc:
                report.errors.append(f"Create failed for event {crm_event.event_id}: {exc}")
                logger.error(
                    "sync.create_failed",
                    event_id=crm_event.event_id,
                    error=str(exc),
                )

        for update in plan.to_update:
            try:
                await self._update(update)
                report.updated += 1
            except Exception as exc:
                report.errors.append(
                    f"Update failed for event {update.crm_event.event_id}: {exc}"
                )
                logger.error(
                    "sync.update_failed",
                    event_id=update.crm_event.event_id,
                    content_id=update.cms_event.id,
                    node_name=update.cms_event.name,
                    error=str(exc),
                )

        logger.info(
            "sync.complete",
            created=report.created,
            updated=report.updated,
            unchanged=report.unchanged,
            errors=len(report.errors),
        )

        return report

    async def _create(self, crm_event: CrmEvent) -> None:
        payload = self._mapper.build_document(crm_event, self._parent_id)
        content_id = await self._cms.create_event(payload)
        if self._publish:
            await self._cms.publish_event(content_id)
        logger.debug("sync.created", event_id=crm_event.event_id, content_id=content_id)

    async def _update(self, update: EventUpdate) -> None:
        document = update.cms_event.document
        if document is None:
            document = await self._cms.get_document(update.cms_event.id)
        payload = self._mapper.build_update(update.crm_event, document)
        await self._cms.update_event(update.cms_event.id, payload)
        if self._publish:
            await self._cms.publish_event(update.cms_event.id)
        logger.debug(
            "sync.updated",
            event_id=update.crm_event.event_id,
            content_id=update.cms_event.id,
        )

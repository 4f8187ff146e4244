"""SyncEngine factory.

Wires settings, logging, the default page template and the caller's
CRM source / CMS gateway into a ready-to-run SyncEngine.
"""

from __future__ import annotations

from src.umbraco_sync.config import Settings, get_settings
from src.umbraco_sync.core.logging import configure_structlog
from src.umbraco_sync.sync.adapter import CmsGateway, CrmSource
from src.umbraco_sync.sync.engine import SyncEngine
from src.umbraco_sync.umbraco.identifiers import UdiGenerator
from src.umbraco_sync.umbraco.mapper import DocumentMapper
from src.umbraco_sync.umbraco.templates import DEC_PAGE_TEMPLATE, PageTemplate


def create_sync_engine(
    crm: CrmSource,
    cms: CmsGateway,
    settings: Settings | None = None,
    template: PageTemplate = DEC_PAGE_TEMPLATE,
    generator: UdiGenerator | None = None,
) -> SyncEngine:
    """Build a SyncEngine from settings.

    Args:
        crm: CRM event source implementation.
        cms: Umbraco gateway implementation.
        settings: Overrides the environment settings (tests).
        template: Page template for new event pages.
        generator: UDI source; defaults to uuid4.
    """
    settings = settings or get_settings()
    configure_structlog(settings)

    mapper = DocumentMapper(template=template, generator=generator)
    return SyncEngine(
        crm=crm,
        cms=cms,
        mapper=mapper,
        venue=settings.TARGET_VENUE,
        parent_id=settings.UMBRACO_PARENT_ID or None,
        publish=settings.PUBLISH_ON_SYNC,
    )

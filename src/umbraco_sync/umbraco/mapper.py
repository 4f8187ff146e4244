"""CRM event -> Umbraco content document mapping.

Two payload shapes:
- build_document(): full create payload. Every page block gets a fresh udi.
- build_update(): update payload. Existing page blocks keep their udis and
  content; only the CRM-driven fields of the Event Description block are
  replaced. Falls back to fresh page blocks when the node has none.

Localized fields carry the same CRM text in every culture of the page
template (no translation); only the template's static blocks differ.
"""

from __future__ import annotations

import copy
from typing import Any

import structlog

from src.umbraco_sync.events.reconcile import normalize_date_string
from src.umbraco_sync.events.schemas import CrmEvent, SocialMedia
from src.umbraco_sync.umbraco.blocks import (
    Block,
    BlockList,
    EventDescriptionBlock,
    HeroImageBlock,
    ImageGalleryBlock,
    Link,
    SocialNetworkBlock,
    StaticBlock,
)
from src.umbraco_sync.umbraco.identifiers import UdiGenerator
from src.umbraco_sync.umbraco.templates import DEC_PAGE_TEMPLATE, LocaleLayout, PageTemplate

logger = structlog.get_logger(__name__)

CONTENT_TYPE_ALIAS = "decEvent"

# Index of the Event Description block in every culture's contentData
EVENT_DESCRIPTION_POSITION = 1

# (SocialMedia attribute, display name) in page order
SOCIAL_CHANNELS: tuple[tuple[str, str], ...] = (
    ("facebook", "Facebook"),
    ("linked_in", "LinkedIn"),
    ("instagram", "Instagram"),
    ("youtube", "Youtube"),
    ("tiktok", "TikTok"),
)


def _invariant(value: Any) -> dict[str, Any]:
    return {"$invariant": value}


class DocumentMapper:
    """Builds Umbraco create/update payloads from CRM events.

    Args:
        template: Page layout per culture, including the static blocks.
            Defaults to the Dubai Exhibition Centre event page.
        generator: UDI source for new blocks. Pass a seeded generator for
            reproducible output.
    """

    def __init__(
        self,
        template: PageTemplate = DEC_PAGE_TEMPLATE,
        generator: UdiGenerator | None = None,
    ) -> None:
        self._template = template
        self._generator = generator or UdiGenerator()

    # ── Payloads ────────────────────────────────────────────────────────────

    def build_document(self, crm_event: CrmEvent, parent_id: str | None = None) -> dict[str, Any]:
        """Map a CRM event to a create payload.

        ``parentId`` is only included when a parent id is given.
        """
        payload = self._event_fields(crm_event, content_type_alias=CONTENT_TYPE_ALIAS)
        payload["pageBlocks"] = self.build_page_blocks(crm_event)
        if parent_id:
            payload["parentId"] = parent_id
        return payload

    def build_update(
        self,
        crm_event: CrmEvent,
        existing_document: dict[str, Any] | None,
    ) -> dict[str, Any]:
        """Map a CRM event to an update payload for an existing content node.

        Args:
            crm_event: Current CRM data.
            existing_document: The node's content as returned by Umbraco.

        Returns:
            Payload with the same fields as a create, minus contentTypeAlias
            and parentId, and with page blocks merged into the existing ones.
        """
        payload = self._event_fields(crm_event)
        existing_blocks = (existing_document or {}).get("pageBlocks")
        if existing_blocks and isinstance(existing_blocks, dict):
            payload["pageBlocks"] = self.merge_page_blocks(existing_blocks, crm_event)
        else:
            logger.debug(
                "mapper.page_blocks_rebuilt",
                event_id=crm_event.event_id,
                stored_type=type(existing_blocks).__name__,
            )
            payload["pageBlocks"] = self.build_page_blocks(crm_event)
        return payload

    def _event_fields(
        self,
        crm_event: CrmEvent,
        content_type_alias: str | None = None,
    ) -> dict[str, Any]:
        cultures = self._template.culture_codes
        title = crm_event.title
        content = crm_event.page_content or ""

        fields: dict[str, Any] = {"name": {culture: title for culture in cultures}}
        if content_type_alias is not None:
            fields["contentTypeAlias"] = content_type_alias
        fields.update(
            {
                "title": {culture: title for culture in cultures},
                "description": {culture: content for culture in cultures},
                "metadataTitle": {culture: title for culture in cultures},
                "metadataDescription": {culture: content for culture in cultures},
                "metadataKeywords": {culture: "" for culture in cultures},
                "date": _invariant(crm_event.start_date),
                "category": _invariant([crm_event.event_type] if crm_event.event_type else []),
                "endDate": _invariant(crm_event.end_date),
                "organiserName": _invariant(crm_event.event_organiser or ""),
            }
        )
        if crm_event.website_url:
            website = Link(name=crm_event.website_url, url=crm_event.website_url)
            fields["organiserWebsite"] = _invariant([website.to_wire()])
        fields.update(
            {
                "organiserSocialNetworks": _invariant(
                    self.build_social_block_list(crm_event.social_media).to_wire()
                ),
                "eventId": _invariant(str(crm_event.event_id)),
                "lastUpdatedDate": _invariant(
                    f'"{normalize_date_string(crm_event.last_updated_date)}"'
                ),
                "location": _invariant(crm_event.location or None),
                "eventVenue": _invariant(list(crm_event.event_venues)),
                "newEventVenue": _invariant([]),
                "audience": _invariant(
                    [crm_event.event_audiences] if crm_event.event_audiences else []
                ),
                "industry": _invariant(list(crm_event.event_sectors)),
            }
        )
        return fields

    # ── Social Networks ─────────────────────────────────────────────────────

    def build_social_block_list(self, social_media: SocialMedia | None) -> BlockList:
        """One Social Network block per channel with a non-blank URL.

        Always rebuilt from current CRM data with fresh udis.
        """
        blocks: list[Block] = []
        if social_media is None:
            return BlockList(blocks=blocks)

        for attribute, display_name in SOCIAL_CHANNELS:
            url = getattr(social_media, attribute)
            if not url or not url.strip():
                continue
            blocks.append(
                SocialNetworkBlock(
                    udi=self._generator.new_udi(),
                    network=display_name,
                    link=Link(target="_blank", url=url),
                )
            )

        return BlockList(blocks=blocks)

    # ── Page Blocks ─────────────────────────────────────────────────────────

    def build_page_blocks(self, crm_event: CrmEvent) -> dict[str, Any]:
        """Fresh page blocks for every culture of the template.

        Each culture starts with Hero Image and Event Description, then the
        Image Gallery where the culture's layout asks for one, then the
        culture's static blocks.
        """
        social = self.build_social_block_list(crm_event.social_media)
        return {
            culture: self._fresh_block_list(crm_event, layout, social).to_wire()
            for culture, layout in self._template.locales.items()
        }

    def _fresh_block_list(
        self,
        crm_event: CrmEvent,
        layout: LocaleLayout,
        social: BlockList,
    ) -> BlockList:
        blocks: list[Block] = [
            HeroImageBlock(udi=self._generator.new_udi()),
            self._event_description(crm_event, self._generator.new_udi(), layout, social),
        ]
        if layout.include_image_gallery:
            blocks.append(ImageGalleryBlock(udi=self._generator.new_udi()))
        for static in layout.static_blocks:
            blocks.append(
                StaticBlock(
                    udi=self._generator.new_udi(),
                    content_type_key=static.content_type_key,
                    properties=copy.deepcopy(static.properties),
                )
            )
        return BlockList(blocks=blocks)

    def _event_description(
        self,
        crm_event: CrmEvent,
        udi: str,
        layout: LocaleLayout,
        social: BlockList,
    ) -> EventDescriptionBlock:
        website = None
        if crm_event.website_url:
            website = Link(target=layout.website_link_target, url=crm_event.website_url)
        return EventDescriptionBlock(
            udi=udi,
            description=crm_event.page_content or "",
            organiser_name=crm_event.event_organiser or "",
            organiser_website=website,
            social_networks=social,
        )

    def merge_page_blocks(self, existing: dict[str, Any], crm_event: CrmEvent) -> dict[str, Any]:
        """Refresh the CRM-driven fields of existing page blocks.

        Layout, udis and every block other than the Event Description are
        returned unchanged. A culture without an Event Description position
        is returned as-is. ``existing`` is never modified.

        Args:
            existing: Culture -> block list wire value, as stored in Umbraco.
            crm_event: Current CRM data.

        Returns:
            New culture -> block list mapping.
        """
        social = self.build_social_block_list(crm_event.social_media)
        merged: dict[str, Any] = {}

        for culture, block_list in existing.items():
            layout = self._template.locales.get(culture, LocaleLayout())
            merged[culture] = self._merge_block_list(culture, block_list, crm_event, layout, social)

        return merged

    def _merge_block_list(
        self,
        culture: str,
        block_list: Any,
        crm_event: CrmEvent,
        layout: LocaleLayout,
        social: BlockList,
    ) -> Any:
        content_data = block_list.get("contentData") if isinstance(block_list, dict) else None
        if (
            not isinstance(content_data, list)
            or len(content_data) <= EVENT_DESCRIPTION_POSITION
            or not isinstance(content_data[EVENT_DESCRIPTION_POSITION], dict)
        ):
            logger.warning(
                "mapper.event_description_missing",
                event_id=crm_event.event_id,
                culture=culture,
            )
            return copy.deepcopy(block_list)

        previous = content_data[EVENT_DESCRIPTION_POSITION]
        refreshed = self._event_description(crm_event, previous.get("udi", ""), layout, social)

        crm_fields = refreshed.crm_fields()

        # Keys keep their stored order; organiserWebsite is dropped when the CRM has none
        replacement = {
            key: crm_fields[key] if key in crm_fields else copy.deepcopy(value)
            for key, value in previous.items()
            if key in crm_fields or key != "organiserWebsite"
        }
        for key, value in crm_fields.items():
            replacement.setdefault(key, value)

        new_content = [
            *copy.deepcopy(content_data[:EVENT_DESCRIPTION_POSITION]),
            replacement,
            *copy.deepcopy(content_data[EVENT_DESCRIPTION_POSITION + 1 :]),
        ]
        return {
            key: new_content if key == "contentData" else copy.deepcopy(value)
            for key, value in block_list.items()
        }

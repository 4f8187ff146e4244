"""Pydantic schemas for CRM and Umbraco event records.

Defines:
- SocialMedia: The fixed five-channel social link set carried by a CRM event
- CrmEvent: Source-of-truth event record from the CRM feed (camelCase wire names)
- CmsEvent: Umbraco-side event record with its prior content document
- EventUpdate, SyncPlan: Reconciliation output (what to create, what to update)
- SyncReport: Outcome counts and errors of one synchronisation run
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ── CRM Records ─────────────────────────────────────────────────────────────


class SocialMedia(BaseModel):
    """Social channel URLs for an event. Any channel may be absent or blank."""

    model_config = ConfigDict(populate_by_name=True)

    facebook: str | None = None
    linked_in: str | None = Field(default=None, alias="linkedIn")
    instagram: str | None = None
    youtube: str | None = None
    tiktok: str | None = None


class CrmEvent(BaseModel):
    """Event record as exported by the CRM.

    Accepts the feed's camelCase keys (``eventId``, ``WebsiteStatus``...) as
    well as the snake_case attribute names. Null list fields from the feed
    are read as empty lists.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    event_id: int = Field(alias="eventId")
    title: str = ""
    featured_image: str | None = Field(default=None, alias="featuredImage")
    page_content: str | None = Field(default=None, alias="pageContent")
    images_carousel: str | None = Field(default=None, alias="imagesCarousel")
    start_date: str | None = Field(default=None, alias="startDate")
    end_date: str | None = Field(default=None, alias="endDate")
    location: str | None = None
    event_audiences: str | None = Field(default=None, alias="eventAudiences")
    event_sectors: list[str] = Field(default_factory=list, alias="eventSectors")
    event_type: str | None = Field(default=None, alias="eventType")
    event_venues: list[str] = Field(default_factory=list, alias="eventVenues")
    event_organiser: str | None = Field(default=None, alias="eventOrganiser")
    website_url: str | None = Field(default=None, alias="websiteURL")
    dwtc_event: bool = Field(default=False, alias="dWTCEvent")
    event_logo: str | None = Field(default=None, alias="eventLogo")
    social_media: SocialMedia = Field(default_factory=SocialMedia, alias="socialMedia")
    last_updated_date: str = Field(default="", alias="lastUpdatedDate")
    website_status: str = Field(default="", alias="WebsiteStatus")

    @field_validator("title", "last_updated_date", "website_status", mode="before")
    @classmethod
    def _none_as_empty_str(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("event_sectors", "event_venues", mode="before")
    @classmethod
    def _none_as_empty_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("social_media", mode="before")
    @classmethod
    def _none_as_empty_social(cls, value: Any) -> Any:
        return {} if value is None else value


# ── Umbraco Records ─────────────────────────────────────────────────────────


class CmsEvent(BaseModel):
    """Event content node as listed by Umbraco.

    ``event_id`` is always a string; numeric ids from the CMS are coerced so
    lookups against stringified CRM ids match. ``document`` holds the full
    prior content response when the caller has already fetched it.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    event_id: str = Field(alias="eventId")
    last_updated_date: str = Field(default="", alias="lastUpdatedDate")
    name: str | dict[str, str] = ""
    document: dict[str, Any] | None = None

    @field_validator("id", "event_id", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> Any:
        if isinstance(value, int):
            return str(value)
        return value

    @field_validator("last_updated_date", "name", mode="before")
    @classmethod
    def _none_as_empty_str(cls, value: Any) -> Any:
        return "" if value is None else value


# ── Reconciliation Output ───────────────────────────────────────────────────


class EventUpdate(BaseModel):
    """A CRM event paired with the CMS node it must overwrite."""

    cms_event: CmsEvent
    crm_event: CrmEvent


class SyncPlan(BaseModel):
    """Partition of CRM events produced by the reconciler.

    ``unchanged`` lists the ids of events already in sync; they appear in
    neither ``to_update`` nor ``to_create``.
    """

    to_update: list[EventUpdate] = Field(default_factory=list)
    to_create: list[CrmEvent] = Field(default_factory=list)
    unchanged: list[str] = Field(default_factory=list)


class SyncReport(BaseModel):
    """Result of a synchronisation run."""

    created: int = 0
    updated: int = 0
    unchanged: int = 0
    errors: list[str] = Field(default_factory=list)

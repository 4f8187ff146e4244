"""Typed Umbraco block list elements and their wire serialization.

Each block kind is a Pydantic model tagged by ``kind``; ``Block`` is the
closed union of all kinds. ``to_wire()`` projects a block (or a whole
BlockList) to the exact JSON shape the Umbraco content API expects:

    {
        "layout": {"Umbraco.BlockList": [{"contentUdi": "umb://element/..."}]},
        "contentData": [{"contentTypeKey": "...", "udi": "umb://element/...", ...}],
        "settingsData": [],
    }

Layout and contentData are both derived from the same block sequence, so
every layout udi has exactly one content entry and vice versa.
"""

from __future__ import annotations

import copy
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

# ── Content Type Keys ───────────────────────────────────────────────────────

HERO_IMAGE_KEY = "fd8b22e5-6560-40ea-8f24-4da5ca390b91"
EVENT_DESCRIPTION_KEY = "163c1761-234c-41f4-92e5-9d3d26186b79"
IMAGE_GALLERY_KEY = "a56add81-856e-4004-8e61-30cc04962297"
SOCIAL_NETWORK_KEY = "93f63d80-3828-4be7-9043-143bd100ca14"

BLOCK_LIST_EDITOR = "Umbraco.BlockList"


# ── Value Objects ───────────────────────────────────────────────────────────


class Link(BaseModel):
    """Umbraco multi-url-picker entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    icon: str = "icon-link"
    name: str | None = None
    node_name: str | None = Field(default=None, alias="nodeName")
    published: bool = True
    query_string: str | None = Field(default=None, alias="queryString")
    target: str | None = None
    trashed: bool = False
    udi: str | None = None
    url: str

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


def rich_text(markup: str) -> dict[str, Any]:
    """Wrap markup in the rich text editor value shape (no embedded blocks)."""
    return {
        "markup": markup,
        "blocks": {
            "layout": None,
            "contentData": [],
            "settingsData": [],
        },
    }


# ── Block Kinds ─────────────────────────────────────────────────────────────


class HeroImageBlock(BaseModel):
    """Top-of-page hero image. Image mapping from the CRM is not wired yet."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["hero_image"] = "hero_image"
    udi: str
    image: list[Any] = Field(default_factory=list)

    def to_wire(self) -> dict[str, Any]:
        return {
            "contentTypeKey": HERO_IMAGE_KEY,
            "udi": self.udi,
            "image": copy.deepcopy(self.image),
        }


class SocialNetworkBlock(BaseModel):
    """One social channel link inside a social networks block list."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["social_network"] = "social_network"
    udi: str
    network: str
    link: Link

    def to_wire(self) -> dict[str, Any]:
        return {
            "contentTypeKey": SOCIAL_NETWORK_KEY,
            "udi": self.udi,
            "socialNetwork": [self.network],
            "link": [self.link.to_wire()],
        }


class EventDescriptionBlock(BaseModel):
    """Event body text with organiser details -- the CRM-driven page block."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["event_description"] = "event_description"
    udi: str
    description: str = ""
    organiser_logo: list[Any] = Field(default_factory=list)
    organiser_name: str = ""
    organiser_website: Link | None = None
    social_networks: BlockList

    def crm_fields(self) -> dict[str, Any]:
        """Wire values of the fields sourced from the CRM.

        ``organiserWebsite`` is only present when the organiser has a website.
        """
        fields: dict[str, Any] = {
            "description": rich_text(f"<p>{self.description}</p>"),
            "organiserName": self.organiser_name,
        }
        if self.organiser_website is not None:
            fields["organiserWebsite"] = [self.organiser_website.to_wire()]
        fields["socialNetworks"] = self.social_networks.to_wire()
        return fields

    def to_wire(self) -> dict[str, Any]:
        fields = self.crm_fields()
        wire: dict[str, Any] = {
            "contentTypeKey": EVENT_DESCRIPTION_KEY,
            "udi": self.udi,
            "description": fields.pop("description"),
            "organiserLogo": copy.deepcopy(self.organiser_logo),
        }
        wire.update(fields)
        return wire


class ImageGalleryBlock(BaseModel):
    """Image carousel. Carousel mapping from the CRM is not wired yet."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["image_gallery"] = "image_gallery"
    udi: str
    images: list[Any] = Field(default_factory=list)

    def to_wire(self) -> dict[str, Any]:
        return {
            "contentTypeKey": IMAGE_GALLERY_KEY,
            "udi": self.udi,
            "images": copy.deepcopy(self.images),
        }


class StaticBlock(BaseModel):
    """Template-supplied block whose content is opaque to the mapper."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["static"] = "static"
    udi: str
    content_type_key: str
    properties: dict[str, Any] = Field(default_factory=dict)

    def to_wire(self) -> dict[str, Any]:
        wire: dict[str, Any] = {
            "contentTypeKey": self.content_type_key,
            "udi": self.udi,
        }
        wire.update(copy.deepcopy(self.properties))
        return wire


Block = Annotated[
    Union[
        HeroImageBlock,
        EventDescriptionBlock,
        ImageGalleryBlock,
        SocialNetworkBlock,
        StaticBlock,
    ],
    Field(discriminator="kind"),
]


class BlockList(BaseModel):
    """Ordered block list value."""

    model_config = ConfigDict(frozen=True)

    blocks: list[Block] = Field(default_factory=list)

    @property
    def udis(self) -> list[str]:
        return [block.udi for block in self.blocks]

    def to_wire(self) -> dict[str, Any]:
        return {
            "layout": {
                BLOCK_LIST_EDITOR: [{"contentUdi": block.udi} for block in self.blocks],
            },
            "contentData": [block.to_wire() for block in self.blocks],
            "settingsData": [],
        }


BlockList.model_rebuild()
EventDescriptionBlock.model_rebuild()

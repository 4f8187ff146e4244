"""Page templates -- the per-locale layout of an event page.

A PageTemplate lists the content locales in order and, for each locale,
whether the page carries an image gallery, which target the organiser
website link opens in, and the static blocks appended after the
CRM-driven blocks. Static blocks are content decisions, not mapping logic:
swap the template to change them.

DEC_PAGE_TEMPLATE is the Dubai Exhibition Centre event page:
- en-US: Hero Image, Event Description, Getting Here, Destination Dubai list,
  Destination Dubai card
- ar: Hero Image, Event Description, Image Gallery, then Arabic versions of
  the same three static blocks
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# ── Template Models ─────────────────────────────────────────────────────────


class StaticBlockTemplate(BaseModel):
    """A static block as authored; the mapper assigns its udi."""

    model_config = ConfigDict(frozen=True)

    content_type_key: str
    properties: dict[str, Any] = Field(default_factory=dict)


class LocaleLayout(BaseModel):
    """Per-locale page shape."""

    model_config = ConfigDict(frozen=True)

    include_image_gallery: bool = False
    website_link_target: str | None = None
    static_blocks: list[StaticBlockTemplate] = Field(default_factory=list)


class PageTemplate(BaseModel):
    """Ordered locale -> layout mapping for an event page."""

    model_config = ConfigDict(frozen=True)

    locales: dict[str, LocaleLayout]

    @property
    def culture_codes(self) -> list[str]:
        return list(self.locales)


# ── Dubai Exhibition Centre Template ────────────────────────────────────────

CARD_BLOCK_KEY = "c12716ad-f907-4621-b2e4-1b242d63974e"
LIST_BLOCK_KEY = "f4965fd3-b550-41c3-997e-1fd7059fe015"

GETTING_HERE_UDI = "umb://document/e079f2d2051b43259dbebe3c82bef8cf"
DESTINATION_DUBAI_UDI = "umb://document/58a786fbf4ec4f9397dca699d4c74f01"


def _markup(value: str) -> dict[str, Any]:
    return {
        "markup": value,
        "blocks": {"layout": None, "contentData": [], "settingsData": []},
    }


def _document_link(name: str, node_name: str, udi: str, url: str) -> dict[str, Any]:
    return {
        "icon": "icon-article color-deep-purple",
        "name": name,
        "nodeName": node_name,
        "published": True,
        "queryString": None,
        "target": None,
        "trashed": False,
        "udi": udi,
        "url": url,
    }


def _media(key: str, media_key: str) -> dict[str, Any]:
    return {"key": key, "mediaKey": media_key, "crops": [], "focalPoint": None}


def _card(
    *,
    title: str,
    subtitle: str,
    description: str,
    link: dict[str, Any],
    image: dict[str, Any],
    left_image: str,
) -> StaticBlockTemplate:
    return StaticBlockTemplate(
        content_type_key=CARD_BLOCK_KEY,
        properties={
            "logo": [],
            "title": title,
            "subtitle": _markup(subtitle),
            "description": _markup(description),
            "link": [link],
            "image": [image],
            "video": "",
            "leftImage": left_image,
            "locationTitle": "",
            "locationItems": "",
        },
    )


def _destination_list(*, title: str, subtitle: str, items: Any) -> StaticBlockTemplate:
    return StaticBlockTemplate(
        content_type_key=LIST_BLOCK_KEY,
        properties={
            "title": title,
            "subtitle": subtitle,
            "description": "",
            "displayNotch": "0",
            "items": items,
        },
    )


_DESTINATION_DUBAI_IMAGE = _media(
    "1d345bd4-ee7f-4a79-b3d0-1246a37e39dc", "aa57deab-5ea6-4a7e-a6ea-1afbc034cd2d"
)

ENGLISH_STATIC_BLOCKS = [
    _card(
        title="Getting Here",
        subtitle="<p>Fastest, easiest route to the venue</p>",
        description=(
            "<p>Benefiting from Dubai South's world-class infrastructure, "
            "getting to Dubai Exhibition Centre is easy.</p>"
        ),
        link=_document_link("Plan your visit", "Getting Here", GETTING_HERE_UDI, "/dec/getting-here/"),
        image=_media("d092581b-7712-4dd5-8bb0-ecf82ec05332", "c4651b2c-4ca5-4c99-9dbb-816542f6d793"),
        left_image="1",
    ),
    _destination_list(
        title="Destination Dubai",
        subtitle="Explore what's happening around Dubai this month",
        items="",
    ),
    _card(
        title="Destination Dubai",
        subtitle="<p>Make the most of your time in Dubai<br><br></p>",
        description=(
            "<p>Experience the best of Dubai, with top attractions, world-class dining, "
            "shopping, and entertainment within reach of Dubai Exhibition Centre.</p>"
        ),
        link=_document_link(
            "Find out more", "Destination Dubai", DESTINATION_DUBAI_UDI, "/dec/destination-dubai/"
        ),
        image=_DESTINATION_DUBAI_IMAGE,
        left_image="0",
    ),
]

ARABIC_STATIC_BLOCKS = [
    _card(
        title="كيفية الوصول",
        subtitle='<p class="p1">أسهل وأسرع الطرق للوصول إلى المركز</p>',
        description=(
            "<p>يمكن الوصول إلى مركز دبي للمعارض بمنتهى السهولة "
            "وذلك بفضل البنية التحتية المتطورة في دبي الجنوب.</p>"
        ),
        link=_document_link("خططوا لزيارتكم", "Getting Here", GETTING_HERE_UDI, "/dec/getting-here/"),
        image=_media("a04adc53-cc3f-4924-b8b7-31174b403b46", "810c9d1c-cbaa-4e23-aa2c-e04d3c081a2f"),
        left_image="1",
    ),
    _destination_list(
        title="معالم دبي",
        subtitle="تعرفوا على أبرز الفعاليات في دبي",
        items={
            "layout": {"Umbraco.BlockList": []},
            "contentData": [],
            "settingsData": [],
        },
    ),
    _card(
        title="معالم دبي",
        subtitle="<p>استمتعوا بكل لحظة من تجربة إقامتكم في دبي</p>",
        description=(
            "<p>توفر دبي لضيوفها أرقى التجارب والفعاليات، وتحتضن مجموعة من أبرز "
            "المعالم السياحية ووجهات تناول الطعام العالمية ومراكز التسوق والترفيه، "
            "جميعها على مقربة من مركز دبي للمعارض.</p>"
        ),
        link=_document_link(
            "استكشفوا المزيد", "Destination Dubai", DESTINATION_DUBAI_UDI, "/dec/destination-dubai/"
        ),
        image=_DESTINATION_DUBAI_IMAGE,
        left_image="0",
    ),
]

DEC_PAGE_TEMPLATE = PageTemplate(
    locales={
        "en-US": LocaleLayout(
            include_image_gallery=False,
            website_link_target=None,
            static_blocks=ENGLISH_STATIC_BLOCKS,
        ),
        "ar": LocaleLayout(
            include_image_gallery=True,
            website_link_target="_blank",
            static_blocks=ARABIC_STATIC_BLOCKS,
        ),
    }
)

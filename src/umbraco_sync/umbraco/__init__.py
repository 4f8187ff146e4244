"""Umbraco content mapping -- block model, page templates, and the document mapper.

Provides:
- UdiGenerator: Element UDIs for new blocks (seedable)
- Block kinds and BlockList with wire serialization
- PageTemplate / DEC_PAGE_TEMPLATE: per-culture layout and static blocks
- DocumentMapper: create/update payloads from CRM events
"""

from src.umbraco_sync.umbraco.blocks import (
    BlockList,
    EventDescriptionBlock,
    HeroImageBlock,
    ImageGalleryBlock,
    Link,
    SocialNetworkBlock,
    StaticBlock,
)
from src.umbraco_sync.umbraco.identifiers import UdiGenerator, to_udi
from src.umbraco_sync.umbraco.mapper import DocumentMapper
from src.umbraco_sync.umbraco.templates import (
    DEC_PAGE_TEMPLATE,
    LocaleLayout,
    PageTemplate,
    StaticBlockTemplate,
)

__all__ = [
    "BlockList",
    "DEC_PAGE_TEMPLATE",
    "DocumentMapper",
    "EventDescriptionBlock",
    "HeroImageBlock",
    "ImageGalleryBlock",
    "Link",
    "LocaleLayout",
    "PageTemplate",
    "SocialNetworkBlock",
    "StaticBlock",
    "StaticBlockTemplate",
    "UdiGenerator",
    "to_udi",
]

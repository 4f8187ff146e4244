"""Source and gateway interfaces the SyncEngine talks to.

Transports (CRM feed over HTTP, Umbraco Content Management API) implement
these ABCs; the engine only depends on the interfaces.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from src.umbraco_sync.events.schemas import CmsEvent, CrmEvent


class CrmSource(ABC):
    """Read access to the CRM event feed."""

    @abstractmethod
    async def fetch_events(self) -> list[CrmEvent]:
        """Fetch all CRM events (unfiltered)."""
        ...


class CmsGateway(ABC):
    """Read/write access to event content in Umbraco.

    Methods:
        list_events: Event nodes currently under the events root.
        get_document: Full content of one node (includes pageBlocks).
        create_event: Create a node from a payload, return its id.
        update_event: Overwrite a node's fields with a payload.
        publish_event: Publish a node in all cultures.
    """

    @abstractmethod
    async def list_events(self) -> list[CmsEvent]:
        """Event nodes currently in the CMS."""
        ...

    @abstractmethod
    async def get_document(self, content_id: str) -> dict[str, Any]:
        """Full content document of a node."""
        ...

    @abstractmethod
    async def create_event(self, payload: dict[str, Any]) -> str:
        """Create a content node, return its id."""
        ...

    @abstractmethod
    async def update_event(self, content_id: str, payload: dict[str, Any]) -> None:
        """Update a content node."""
        ...

    @abstractmethod
    async def publish_event(self, content_id: str) -> None:
        """Publish a content node."""
        ...

"""Unit tests for the SyncEngine orchestration and its factory.

Uses AsyncMock adapters -- no real CRM or Umbraco calls.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.umbraco_sync.config import Settings
from src.umbraco_sync.events.schemas import CmsEvent, CrmEvent, SyncReport
from src.umbraco_sync.main import create_sync_engine
from src.umbraco_sync.sync.adapter import CmsGateway, CrmSource
from src.umbraco_sync.sync.engine import SyncEngine

VENUE = "Dubai Exhibition Centre"


# ── Helpers ────────────────────────────────────────────────────────────────


def _make_crm_event(event_id: int, **overrides) -> CrmEvent:
    defaults = {
        "eventId": event_id,
        "title": f"Event {event_id}",
        "eventVenues": [VENUE],
        "WebsiteStatus": "Online",
        "lastUpdatedDate": "2025-05-01T00:00:00",
    }
    defaults.update(overrides)
    return CrmEvent.model_validate(defaults)


def _make_cms_event(event_id: int, updated: str = '"2025-05-01T00:00:00"', **overrides) -> CmsEvent:
    defaults = {
        "id": f"node-{event_id}",
        "eventId": str(event_id),
        "lastUpdatedDate": updated,
        "name": f"Event {event_id}",
    }
    defaults.update(overrides)
    return CmsEvent.model_validate(defaults)


# ── SyncEngine Tests ──────────────────────────────────────────────────────


class TestSyncEngine:
    """Test SyncEngine run flow against mocked adapters."""

    @pytest.fixture
    def mock_crm(self):
        """Mock CRM source."""
        return AsyncMock(spec=CrmSource)

    @pytest.fixture
    def mock_cms(self):
        """Mock Umbraco gateway."""
        cms = AsyncMock(spec=CmsGateway)
        cms.list_events.return_value = []
        cms.create_event.return_value = "node-new"
        cms.get_document.return_value = {}
        return cms

    @pytest.fixture
    def engine(self, mock_crm, mock_cms, mapper):
        return SyncEngine(mock_crm, mock_cms, mapper, venue=VENUE, parent_id="parent-1")

    async def test_creates_new_events(self, engine, mock_crm, mock_cms):
        """Unknown CRM events are created under the parent and published."""
        mock_crm.fetch_events.return_value = [_make_crm_event(1)]

        report = await engine.run()

        assert report == SyncReport(created=1, updated=0, unchanged=0, errors=[])
        payload = mock_cms.create_event.call_args[0][0]
        assert payload["eventId"] == {"$invariant": "1"}
        assert payload["parentId"] == "parent-1"
        mock_cms.publish_event.assert_awaited_once_with("node-new")

    async def test_updates_changed_events(self, engine, mock_crm, mock_cms):
        """Changed events are updated in place using the stored document."""
        mock_crm.fetch_events.return_value = [
            _make_crm_event(1, lastUpdatedDate="2025-06-01T00:00:00")
        ]
        mock_cms.list_events.return_value = [_make_cms_event(1)]

        report = await engine.run()

        assert report.updated == 1
        mock_cms.get_document.assert_awaited_once_with("node-1")
        content_id, payload = mock_cms.update_event.call_args[0]
        assert content_id == "node-1"
        assert payload["lastUpdatedDate"] == {"$invariant": '"2025-06-01T00:00:00"'}
        assert "parentId" not in payload
        mock_cms.publish_event.assert_awaited_once_with("node-1")

    async def test_update_uses_attached_document(self, engine, mock_crm, mock_cms, mapper):
        """A CmsEvent that already carries its document is not re-fetched."""
        crm_event = _make_crm_event(1, lastUpdatedDate="2025-06-01T00:00:00")
        document = {"pageBlocks": mapper.build_page_blocks(crm_event)}
        mock_crm.fetch_events.return_value = [crm_event]
        mock_cms.list_events.return_value = [_make_cms_event(1, document=document)]

        await engine.run()

        mock_cms.get_document.assert_not_awaited()
        payload = mock_cms.update_event.call_args[0][1]
        assert payload["pageBlocks"]["en-US"]["layout"] == document["pageBlocks"]["en-US"]["layout"]

    async def test_unchanged_events_are_not_written(self, engine, mock_crm, mock_cms):
        mock_crm.fetch_events.return_value = [_make_crm_event(1)]
        mock_cms.list_events.return_value = [_make_cms_event(1)]

        report = await engine.run()

        assert report == SyncReport(created=0, updated=0, unchanged=1, errors=[])
        mock_cms.create_event.assert_not_awaited()
        mock_cms.update_event.assert_not_awaited()
        mock_cms.publish_event.assert_not_awaited()

    async def test_filters_by_venue_and_status(self, engine, mock_crm, mock_cms):
        mock_crm.fetch_events.return_value = [
            _make_crm_event(1, WebsiteStatus="Offline"),
            _make_crm_event(2, eventVenues=["Other Venue"]),
            _make_crm_event(3),
        ]

        report = await engine.run()

        assert report.created == 1
        payload = mock_cms.create_event.call_args[0][0]
        assert payload["eventId"] == {"$invariant": "3"}

    async def test_write_failure_recorded_and_run_continues(self, engine, mock_crm, mock_cms):
        mock_crm.fetch_events.return_value = [_make_crm_event(1), _make_crm_event(2)]
        mock_cms.create_event.side_effect = [RuntimeError("422 Unprocessable"), "node-2"]

        report = await engine.run()

        assert report.created == 1
        assert len(report.errors) == 1
        assert "event 1" in report.errors[0]
        assert "422 Unprocessable" in report.errors[0]
        mock_cms.publish_event.assert_awaited_once_with("node-2")

    async def test_update_failure_recorded(self, engine, mock_crm, mock_cms):
        mock_crm.fetch_events.return_value = [_make_crm_event(1, lastUpdatedDate="new")]
        mock_cms.list_events.return_value = [_make_cms_event(1)]
        mock_cms.update_event.side_effect = RuntimeError("timeout")

        report = await engine.run()

        assert report.updated == 0
        assert report.errors == ["Update failed for event 1: timeout"]
        mock_cms.publish_event.assert_not_awaited()

    async def test_update_failure_logs_node_name(self, engine, mock_crm, mock_cms, monkeypatch):
        """The failure log names the Umbraco node being overwritten."""
        log = MagicMock()
        monkeypatch.setattr("src.umbraco_sync.sync.engine.logger", log)
        mock_crm.fetch_events.return_value = [_make_crm_event(1, lastUpdatedDate="new")]
        mock_cms.list_events.return_value = [
            _make_cms_event(1, name={"en-US": "Gulfood", "ar": "Gulfood"})
        ]
        mock_cms.update_event.side_effect = RuntimeError("timeout")

        await engine.run()

        log.error.assert_called_once_with(
            "sync.update_failed",
            event_id=1,
            content_id="node-1",
            node_name={"en-US": "Gulfood", "ar": "Gulfood"},
            error="timeout",
        )

    async def test_publish_disabled(self, mock_crm, mock_cms, mapper):
        engine = SyncEngine(mock_crm, mock_cms, mapper, venue=VENUE, publish=False)
        mock_crm.fetch_events.return_value = [_make_crm_event(1)]

        await engine.run()

        mock_cms.publish_event.assert_not_awaited()
        assert "parentId" not in mock_cms.create_event.call_args[0][0]

    async def test_fetch_failure_propagates(self, engine, mock_crm):
        mock_crm.fetch_events.side_effect = ConnectionError("CRM unreachable")

        with pytest.raises(ConnectionError):
            await engine.run()


# ── Factory Tests ─────────────────────────────────────────────────────────


class TestCreateSyncEngine:
    """Test create_sync_engine wiring from Settings."""

    async def test_uses_settings(self):
        crm = AsyncMock(spec=CrmSource)
        cms = AsyncMock(spec=CmsGateway)
        crm.fetch_events.return_value = [_make_crm_event(1, eventVenues=["Hall X"])]
        cms.list_events.return_value = []
        cms.create_event.return_value = "node-1"

        settings = Settings(TARGET_VENUE="Hall X", UMBRACO_PARENT_ID="root-9", PUBLISH_ON_SYNC=False)
        engine = create_sync_engine(crm, cms, settings=settings)

        report = await engine.run()

        assert report.created == 1
        assert cms.create_event.call_args[0][0]["parentId"] == "root-9"
        cms.publish_event.assert_not_awaited()

    def test_empty_parent_id_means_none(self):
        settings = Settings(UMBRACO_PARENT_ID="")
        engine = create_sync_engine(
            AsyncMock(spec=CrmSource), AsyncMock(spec=CmsGateway), settings=settings
        )
        assert engine._parent_id is None

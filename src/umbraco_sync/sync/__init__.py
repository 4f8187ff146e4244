"""Sync orchestration -- source/gateway interfaces and the SyncEngine."""

from src.umbraco_sync.sync.adapter import CmsGateway, CrmSource
from src.umbraco_sync.sync.engine import SyncEngine

__all__ = ["CmsGateway", "CrmSource", "SyncEngine"]

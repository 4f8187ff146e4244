"""Shared test fixtures.

Provides:
- A raw CRM feed record (camelCase, as the CRM exports it)
- A seeded UdiGenerator and a DocumentMapper built on it
"""

from __future__ import annotations

import random
from typing import Any

import pytest

from src.umbraco_sync.umbraco.identifiers import UdiGenerator
from src.umbraco_sync.umbraco.mapper import DocumentMapper


@pytest.fixture
def crm_record() -> dict[str, Any]:
    """A complete CRM feed record for an online event at the exhibition centre."""
    return {
        "title": "Gulf Food Manufacturing",
        "featuredImage": "https://cdn.example.com/gfm.jpg",
        "pageContent": "The region's largest food processing show.",
        "imagesCarousel": "",
        "startDate": "2025-11-04T09:00:00",
        "endDate": "2025-11-06T18:00:00",
        "location": "Halls 1-4",
        "eventAudiences": "Trade",
        "eventSectors": ["Food & Beverage", "Manufacturing"],
        "eventId": 4821,
        "eventType": "Exhibition",
        "eventVenues": ["Dubai Exhibition Centre"],
        "eventOrganiser": "DWTC Events",
        "websiteURL": "https://gulfoodmanufacturing.com",
        "dWTCEvent": True,
        "eventLogo": None,
        "socialMedia": {
            "facebook": "https://facebook.com/gfm",
            "linkedIn": "",
            "instagram": "   ",
            "youtube": None,
            "tiktok": "https://tiktok.com/@gfm",
        },
        "lastUpdatedDate": "2025-06-01T10:15:00",
        "WebsiteStatus": "Online",
    }


@pytest.fixture
def udi_generator() -> UdiGenerator:
    """Reproducible UDI source."""
    return UdiGenerator(rng=random.Random(1234))


@pytest.fixture
def mapper(udi_generator) -> DocumentMapper:
    """DocumentMapper with the default template and a seeded generator."""
    return DocumentMapper(generator=udi_generator)

"""Shared test fixtures for contentdoc."""

import pytest

from contentdoc.config.models import ContentDocConfig
from contentdoc.document.models import EMPTY_DOCUMENT_JSON


COURSE_DESCRIPTION = "Intro\n\nThis course covers:\n- topic one\n- topic two"


@pytest.fixture
def course_description():
    return COURSE_DESCRIPTION


@pytest.fixture
def sample_config():
    return ContentDocConfig()


@pytest.fixture
def legacy_records():
    """Record file contents covering the default collection rules."""
    return {
        "courses": [
            {
                "id": "c1",
                "description": COURSE_DESCRIPTION,
                "shortDescription": "Learn **fast**",
            },
            {
                "id": "c2",
                "description": EMPTY_DOCUMENT_JSON,
                "shortDescription": "",
            },
        ],
        "sections": [
            {"id": "s1", "description": "Plain section text"},
            {"id": "s2", "description": None},
        ],
        "lessons": [
            {
                "id": "l1",
                "type": "ARTICLE",
                "content": "# Heading\nBody line",
                "description": "Short summary",
            },
            {
                "id": "l2",
                "type": "VIDEO",
                "content": "https://videos.example.com/intro",
                "description": "",
            },
        ],
        "users": [{"id": "u1", "bio": "untouched"}],
    }

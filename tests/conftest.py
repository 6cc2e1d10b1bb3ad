"""Shared pytest fixtures."""

import logging

import pytest

from hnhiring.logging.context import clear_log_context

from tests.helpers.comment_fixtures import (
    ACME_TEXT,
    EXAMPLECO_TEXT,
    FIXTURES_DIR,
    load_comment_hits,
)


@pytest.fixture
def fixtures_dir():
    return FIXTURES_DIR


@pytest.fixture
def comment_hits():
    """All comment hits from the thread fixture, including the invalid one."""
    return load_comment_hits()


@pytest.fixture
def valid_comment_hits(comment_hits):
    return [hit for hit in comment_hits if "objectID" in hit]


@pytest.fixture
def acme_hit():
    return {
        "id": "101",
        "story_id": 43243024,
        "parent_id": 43243024,
        "story_title": "Ask HN: Who is hiring? (March 2025)",
        "author": "acme_recruiter",
        "created_at": "2025-03-01T16:00:00.000Z",
        "comment_text": ACME_TEXT,
    }


@pytest.fixture
def exampleco_hit():
    return {
        "id": "102",
        "story_id": 43243024,
        "created_at": "2025-03-02T10:00:00.000Z",
        "comment_text": EXAMPLECO_TEXT,
    }


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run in an empty directory with no hnhiring environment variables set."""
    for name in ("LOG_LEVEL", "LOG_FORMAT", "ENVIRONMENT", "HNHIRING_CONFIG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def clean_log_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level replaced by configure_logging()."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)

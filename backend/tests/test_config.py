"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from algosearch.config import Settings


def test_defaults(monkeypatch):
    for key in ("ALGOSEARCH_PAGE_SIZE", "ALGOSEARCH_SEARCH_API_URL", "ALGOSEARCH_INTERSECTION_THRESHOLD"):
        monkeypatch.delenv(key, raising=False)
    settings = Settings(_env_file=None)
    assert settings.search_api_url == "http://localhost:5000/api/search"
    assert settings.page_size == 10
    assert settings.intersection_threshold == 0.1


def test_env_override(monkeypatch):
    monkeypatch.setenv("ALGOSEARCH_PAGE_SIZE", "25")
    monkeypatch.setenv("ALGOSEARCH_SEARCH_API_URL", "http://search.internal/api/search")
    settings = Settings(_env_file=None)
    assert settings.page_size == 25
    assert settings.search_api_url == "http://search.internal/api/search"


def test_invalid_page_size():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, page_size=0)


def test_invalid_threshold():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, intersection_threshold=1.5)

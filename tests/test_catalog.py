"""Tests del catálogo: datos en vivo, fallback demo y búsqueda."""

import pytest
from tenacity import wait_none

from propertyhub.catalog import (
    DEMO_PROPERTY_ROWS,
    PropertyCatalog,
    get_demo_properties,
    get_demo_property_by_id,
)
from propertyhub.config import Settings
from propertyhub.database import PropertyRepository
from propertyhub.filtering import FilterCriteria


@pytest.fixture
def catalog(client, settings):
    return PropertyCatalog(PropertyRepository(client), settings=settings, wait=wait_none())


def test_load_returns_live_properties(catalog, fake_db, property_row):
    fake_db.tables["properties"] = [
        property_row(id="old", created_at="2024-01-01"),
        property_row(id="new", created_at="2024-05-01"),
        property_row(id="gone", status="sold"),
    ]
    result = catalog.load()

    assert [p.id for p in result.properties] == ["new", "old"]
    assert result.is_demo is False
    assert result.error is None


def test_empty_source_falls_back_to_demo(catalog):
    result = catalog.load()

    assert result.is_demo is True
    assert result.error is None
    assert [p.id for p in result.properties] == ["1", "2", "3", "4", "5", "6"]


def test_failing_source_falls_back_to_demo_with_error(catalog, fake_db):
    fake_db.fail("properties", ConnectionError("network down"))
    result = catalog.load()

    assert result.is_demo is True
    assert result.error == "network down"
    assert len(result.properties) == len(DEMO_PROPERTY_ROWS)


def test_transient_failures_are_retried(client, settings, fake_db, property_row):
    retrying_settings = settings.model_copy(update={"fetch_attempts": 3})
    catalog = PropertyCatalog(PropertyRepository(client), settings=retrying_settings, wait=wait_none())
    fake_db.tables["properties"] = [property_row(id="live")]
    fake_db.fail("properties", ConnectionError("timeout"), ConnectionError("timeout"))

    result = catalog.load()

    assert [p.id for p in result.properties] == ["live"]
    assert len([c for c in fake_db.calls if c["table"] == "properties"]) == 3


def test_fallback_disabled(client, fake_db):
    settings = Settings(
        supabase_url="https://test.supabase.co",
        supabase_key="test-key",
        fetch_attempts=1,
        demo_fallback_enabled=False,
    )
    catalog = PropertyCatalog(PropertyRepository(client), settings=settings, wait=wait_none())

    assert catalog.load().properties == []

    fake_db.fail("properties", ConnectionError("network down"))
    with pytest.raises(ConnectionError):
        catalog.load()


def test_invalid_rows_are_skipped(catalog, fake_db, property_row):
    fake_db.tables["properties"] = [
        property_row(id="ok"),
        property_row(id="bad", price=-5),
    ]
    result = catalog.load()
    assert [p.id for p in result.properties] == ["ok"]


def test_search_filters_loaded_properties(catalog):
    result = catalog.search(FilterCriteria(query="villa"))

    assert result.is_demo is True
    assert [p.title for p in result.properties] == ["Spacious 4BR Villa in Karen"]


def test_search_by_bracket_over_demo_data(catalog):
    result = catalog.search(FilterCriteria(property_type="apartment", price_range="under-10m"))
    assert [p.id for p in result.properties] == ["4"]


def test_get_property_prefers_live_row(catalog, fake_db, property_row):
    fake_db.tables["properties"] = [property_row(id="1", title="Live One")]
    assert catalog.get_property("1").title == "Live One"


def test_get_property_falls_back_to_demo(catalog, fake_db):
    assert catalog.get_property("6").title == "Luxury Penthouse in Upper Hill"
    assert catalog.get_property("999") is None

    fake_db.fail("properties", ConnectionError("down"))
    assert catalog.get_property("2").title == "Spacious 4BR Villa in Karen"


def test_demo_properties_are_fresh_copies():
    first = get_demo_properties()
    first[0].features.append("Changed")

    assert "Changed" not in get_demo_properties()[0].features
    assert get_demo_property_by_id("1") == get_demo_properties()[0]
    assert get_demo_property_by_id("nope") is None

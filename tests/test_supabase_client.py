"""Tests de la construcción del cliente de Supabase."""

import pytest

from propertyhub.config import Settings
from propertyhub.database import SupabaseClient, create_supabase_client
from propertyhub.database import supabase_client as module


@pytest.fixture
def created(monkeypatch):
    calls = []

    def fake_create_client(url, key):
        calls.append((url, key))
        return object()

    monkeypatch.setattr(module, "create_client", fake_create_client)
    return calls


def test_client_uses_anon_key(created):
    settings = Settings(
        supabase_url="https://test.supabase.co",
        supabase_key="anon-key",
    )

    client = create_supabase_client(settings)

    assert isinstance(client, SupabaseClient)
    assert created == [("https://test.supabase.co", "anon-key")]


@pytest.mark.parametrize(
    "url,key",
    [("test.supabase.co", "anon-key"), ("https://test.supabase.co", "")],
)
def test_invalid_credentials_are_rejected(created, url, key):
    with pytest.raises(ValueError):
        create_supabase_client(Settings(supabase_url=url, supabase_key=key))
    assert created == []


def test_wrapper_exposes_tables_and_auth(fake_db):
    client = SupabaseClient(fake_db)

    assert client.client is fake_db
    assert client.auth is fake_db.auth
    assert client.table("properties").execute().data == []

from __future__ import annotations

import asyncio
import logging

from pymongo.errors import ServerSelectionTimeoutError

from job_tracker.core.config import COLLECTION_NAME, DATABASE_NAME, Settings
from job_tracker.infrastructure.db import mongo_connection
from job_tracker.infrastructure.db.mongo_connection import MongoConnection


class _FakeClient:
    """Stands in for AsyncMongoClient; records constructor args and close calls."""

    instances = []
    ping_error = None

    def __init__(self, uri, **kwargs):
        self.uri = uri
        self.kwargs = kwargs
        self.closed = False
        self.admin = self
        _FakeClient.instances.append(self)

    async def command(self, name):
        if _FakeClient.ping_error is not None:
            raise _FakeClient.ping_error
        return {"ok": 1}

    def __getitem__(self, db_name):
        return {COLLECTION_NAME: f"{db_name}.{COLLECTION_NAME}"}

    async def close(self):
        self.closed = True


def _install_fake_client(monkeypatch, ping_error=None):
    _FakeClient.instances = []
    _FakeClient.ping_error = ping_error
    monkeypatch.setattr(mongo_connection, "AsyncMongoClient", _FakeClient)


def test_connect_selects_fixed_collection(monkeypatch):
    _install_fake_client(monkeypatch)
    monkeypatch.setenv("MONGO_URI", "mongodb://db.internal:27017/")
    connection = MongoConnection(Settings())

    assert asyncio.run(connection.connect()) is True

    assert connection.is_connected()
    assert connection.collection == f"{DATABASE_NAME}.{COLLECTION_NAME}"
    client = _FakeClient.instances[0]
    assert client.uri == "mongodb://db.internal:27017/"
    assert client.kwargs["tz_aware"] is True


def test_connect_failure_is_logged_and_leaves_handle_unset(monkeypatch, caplog):
    _install_fake_client(monkeypatch, ping_error=ServerSelectionTimeoutError("no servers"))
    connection = MongoConnection(Settings())

    with caplog.at_level(logging.ERROR, logger="job_tracker.infrastructure.db.mongo_connection"):
        assert asyncio.run(connection.connect()) is False

    assert connection.collection is None
    assert not connection.is_connected()
    assert _FakeClient.instances[0].closed
    assert "MongoDB connection failed" in caplog.text


def test_close_releases_client(monkeypatch):
    _install_fake_client(monkeypatch)
    connection = MongoConnection(Settings())

    async def _run():
        await connection.connect()
        await connection.close()

    asyncio.run(_run())

    assert _FakeClient.instances[0].closed
    assert connection.collection is None


def test_default_settings(monkeypatch):
    for name in ("PORT", "MONGO_URI"):
        monkeypatch.delenv(name, raising=False)
    # Keep a local .env from overriding the defaults under test
    monkeypatch.setattr("job_tracker.core.config.load_dotenv", lambda *a, **k: False)

    settings = Settings()

    assert settings.port == 5000
    assert settings.mongo_uri == "mongodb://localhost:27017/"
    assert settings.mongo_database_name == "job_tracker_db"
    assert settings.companies_collection == "companies"

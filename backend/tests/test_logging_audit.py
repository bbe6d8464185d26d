from __future__ import annotations

import json
import logging
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

import readguard.main as main_mod
from readguard.api.deps import get_db_session
from readguard.main import app
from readguard.models.account import Account
from readguard.readable import attribute_names
from readguard.security.auth import JWT_SECRET_ENV


@pytest.fixture()
def client(monkeypatch: pytest.MonkeyPatch, session_factory: sessionmaker[Session]) -> Generator[TestClient, None, None]:
    from conftest import JWT_SECRET

    monkeypatch.setenv(JWT_SECRET_ENV, JWT_SECRET)

    def _session() -> Generator[Session, None, None]:
        s = session_factory()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[get_db_session] = _session
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_request_id_propagates_and_access_log_is_sanitized(client, db_session, caplog):
    from conftest import make_jwt

    db_session.add(Account(name="Ann", password="top-secret"))
    db_session.commit()

    caplog.set_level(logging.INFO, logger=main_mod.logger.name)
    r = client.get(
        "/v1/accounts",
        headers={"Authorization": f"Bearer {make_jwt('test', 'admin')}", "x-request-id": "req-1"},
    )
    assert r.status_code == 200
    assert r.headers["x-request-id"] == "req-1"

    access_lines = [rec.getMessage() for rec in caplog.records if '"event": "access"' in rec.getMessage()]
    assert access_lines, "No access logs captured."

    payload = json.loads(access_lines[-1])
    assert payload["event"] == "access"
    assert payload["request_id"] == "req-1"
    assert payload["path"] == "/v1/accounts"
    assert payload["status_code"] == 200
    joined = "\n".join(rec.getMessage() for rec in caplog.records)
    assert "authorization" not in joined.lower()
    assert "top-secret" not in joined


def test_request_id_is_generated_when_absent(client):
    from conftest import make_jwt

    r = client.get("/v1/accounts/readable", headers={"Authorization": f"Bearer {make_jwt('test', 'user')}"})
    assert r.status_code == 200
    assert r.headers["x-request-id"]


def _access_payloads(caplog) -> list[dict]:
    return [json.loads(rec.getMessage()) for rec in caplog.records if '"event": "access"' in rec.getMessage()]


def test_access_log_counts_exposed_and_withheld_attributes(client, db_session, caplog):
    from conftest import make_jwt

    rows = [Account(name="Ann", email="ann@example.com"), Account(name="Bob", addr_city="Oslo")]
    db_session.add_all(rows)
    db_session.commit()
    column_count = len(attribute_names(rows[0]))

    caplog.set_level(logging.INFO, logger=main_mod.logger.name)
    r = client.get("/v1/accounts", headers={"Authorization": f"Bearer {make_jwt('test', 'user')}"})
    assert r.status_code == 200

    payload = _access_payloads(caplog)[-1]
    # user reads name, email, addr_city and addr_zip of each record
    assert payload["role"] == "user"
    assert payload["records"] == 2
    assert payload["attributes_exposed"] == 8
    assert payload["attributes_withheld"] == 2 * column_count - 8


def test_access_log_for_unknown_role_withholds_everything(client, db_session, caplog):
    from conftest import make_jwt

    account = Account(name="Ann", password="top-secret")
    db_session.add(account)
    db_session.commit()

    caplog.set_level(logging.INFO, logger=main_mod.logger.name)
    r = client.get(f"/v1/accounts/{account.id}", headers={"Authorization": f"Bearer {make_jwt('test', 'intruder')}"})
    assert r.json() == {}

    payload = _access_payloads(caplog)[-1]
    assert payload["role"] == "intruder"
    assert payload["records"] == 1
    assert payload["attributes_exposed"] == 0
    assert payload["attributes_withheld"] == len(attribute_names(account))


def test_access_log_without_records_has_no_counts(client, caplog):
    from conftest import make_jwt

    caplog.set_level(logging.INFO, logger=main_mod.logger.name)
    client.get("/v1/accounts/readable", headers={"Authorization": f"Bearer {make_jwt('test', 'admin')}"})

    payload = _access_payloads(caplog)[-1]
    assert payload["path"] == "/v1/accounts/readable"
    assert "records" not in payload

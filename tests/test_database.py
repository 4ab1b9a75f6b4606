"""Tests for request log storage."""

import sqlite3

from api.logging import RequestLog, log_request
from core.database import init_database


def test_init_database_creates_tables(tmp_path):
    path = init_database(tmp_path / "nested" / "log.db")
    conn = sqlite3.connect(path)
    try:
        tables = {
            name for (name,) in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
        }
    finally:
        conn.close()
    assert {"api_requests", "api_request_details"} <= tables


def test_init_database_is_repeatable(tmp_path):
    path = tmp_path / "log.db"
    init_database(path)
    init_database(path)
    assert path.exists()


def test_log_request_writes_details(db_path):
    log = RequestLog(
        endpoint="/v1/schedule/parse",
        method="POST",
        status_code=200,
        clause_count=2,
        events_parsed=1,
        errors_reported=1,
        details=[("parse_error", "bogus text")],
    )
    log_request(log)

    conn = sqlite3.connect(db_path)
    try:
        (request_id, status_code) = conn.execute(
            "SELECT request_id, status_code FROM api_requests"
        ).fetchone()
        detail = conn.execute(
            "SELECT request_id, detail_type, message FROM api_request_details"
        ).fetchone()
    finally:
        conn.close()
    assert (request_id, status_code) == (log.request_id, 200)
    assert detail == (log.request_id, "parse_error", "bogus text")

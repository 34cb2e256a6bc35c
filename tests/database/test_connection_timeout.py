from __future__ import annotations

import mysql.connector

from src.employee_api.employee_api.container import build_container
from src.employee_api.employee_api.database.connection import DatabaseConnection, DBConfig


class RecordingConnect:
    def __init__(self):
        self.kwargs = None

    def __call__(self, **kwargs):
        self.kwargs = kwargs
        return object()


def test_connect_bounds_every_operation_with_default_timeout(monkeypatch):
    connect = RecordingConnect()
    monkeypatch.setattr(mysql.connector, "connect", connect)

    DatabaseConnection(DBConfig(host="db", port=3306, user="u", password="p", database="my_db")).connect()

    assert connect.kwargs["connection_timeout"] == 10
    assert connect.kwargs["use_pure"] is True
    assert connect.kwargs["database"] == "my_db"


def test_build_container_carries_configured_timeout(monkeypatch):
    connect = RecordingConnect()
    monkeypatch.setattr(mysql.connector, "connect", connect)
    monkeypatch.setattr(DatabaseConnection, "_instance", None)

    container = build_container(
        db_config={"host": "db", "port": 3307, "user": "u", "password": "p", "database": "my_db", "timeout": 3}
    )
    container.conn.connect()

    assert connect.kwargs["connection_timeout"] == 3
    assert connect.kwargs["port"] == 3307
    assert connect.kwargs["use_pure"] is True

"""Fixtures for integration tests against a real MySQL server."""

from __future__ import annotations

import os
import shutil
import subprocess
from datetime import timedelta

import pytest

from mysqltime import Time


# ---------------------------------------------------------------------------
# Container runtime detection (Docker or Podman)
# ---------------------------------------------------------------------------

def _get_podman_socket() -> str | None:
    """Get the Podman machine socket path, if available."""
    try:
        result = subprocess.run(
            ["podman", "machine", "inspect", "--format",
             "{{.ConnectionInfo.PodmanSocket.Path}}"],
            capture_output=True, text=True, check=True, timeout=5,
        )
        sock = result.stdout.strip()
        if sock and os.path.exists(sock):
            return sock
    except (subprocess.CalledProcessError, subprocess.TimeoutExpired,
            FileNotFoundError):
        pass
    return None


def _container_runtime_available() -> bool:
    for cmd in ["docker", "podman"]:
        if shutil.which(cmd):
            try:
                subprocess.run(
                    [cmd, "info"], capture_output=True, check=True, timeout=10,
                )
                return True
            except (subprocess.CalledProcessError, subprocess.TimeoutExpired,
                    FileNotFoundError):
                continue
    return False


def _configure_testcontainers_for_podman() -> None:
    if not shutil.which("podman"):
        return
    os.environ.setdefault("TESTCONTAINERS_RYUK_DISABLED", "true")
    if "DOCKER_HOST" not in os.environ:
        sock = _get_podman_socket()
        if sock:
            os.environ["DOCKER_HOST"] = f"unix://{sock}"


CONTAINER_RUNTIME_AVAILABLE = _container_runtime_available()

if CONTAINER_RUNTIME_AVAILABLE:
    _configure_testcontainers_for_podman()


# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------

SEED_ROWS = [
    {"user_id": 1, "start": "09:00:00", "end": "17:00:00"},
    {"user_id": 2, "start": "08:30:00", "end": "16:45:30"},
    {"user_id": 3, "start": "-05:30:15", "end": "838:59:59"},
    {"user_id": 4, "start": "10:00:00", "end": None},
]

EXPECTED = {
    1: (Time(timedelta(hours=9)), Time(timedelta(hours=17))),
    2: (Time(timedelta(hours=8, minutes=30)), Time(timedelta(hours=16, minutes=45, seconds=30))),
    3: (Time(-timedelta(hours=5, minutes=30, seconds=15)), Time(timedelta(hours=838, minutes=59, seconds=59))),
    4: (Time(timedelta(hours=10)), Time()),
}


def _setup_mysql(conn) -> None:
    cur = conn.cursor()
    cur.execute("DROP TABLE IF EXISTS work_hour")
    cur.execute("""
        CREATE TABLE work_hour (
            user_id BIGINT NOT NULL PRIMARY KEY,
            work_hour_start TIME,
            work_hour_end TIME
        )
    """)
    for row in SEED_ROWS:
        cur.execute(
            "INSERT INTO work_hour (user_id, work_hour_start, work_hour_end) VALUES (%s, %s, %s)",
            (row["user_id"], row["start"], row["end"]),
        )
    conn.commit()
    cur.close()


# ---------------------------------------------------------------------------
# Session-scoped fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def mysql_container():
    if not CONTAINER_RUNTIME_AVAILABLE:
        pytest.skip("No container runtime (Docker/Podman) available")
    from testcontainers.mysql import MySqlContainer
    with MySqlContainer("mysql:8.4") as mysql:
        yield mysql


def _connect(mysql_container, **kwargs):
    import mysql.connector
    return mysql.connector.connect(
        host=mysql_container.get_container_host_ip(),
        port=int(mysql_container.get_exposed_port(3306)),
        user=mysql_container.username,
        password=mysql_container.password,
        database=mysql_container.dbname,
        **kwargs,
    )


@pytest.fixture(scope="session")
def mysql_db(mysql_container):
    conn = _connect(mysql_container)
    _setup_mysql(conn)
    yield conn
    conn.close()


@pytest.fixture(scope="session")
def mysql_raw_db(mysql_db, mysql_container):
    """Connection returning undecoded column values, as a driver-agnostic scanner sees them."""
    conn = _connect(mysql_container, raw=True)
    yield conn
    conn.close()


@pytest.fixture(scope="session")
def mysql_time_db(mysql_db, mysql_container):
    """Connection using ``TimeConverter`` for TIME columns."""
    from mysqltime.adapters.mysql import TimeConverter
    conn = _connect(mysql_container, converter_class=TimeConverter, use_pure=True)
    yield conn
    conn.close()

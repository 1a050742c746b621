from __future__ import annotations

import datetime as dt
import logging

import pytest

from llmplatform.core.logging import setup_logging
from llmplatform.core.settings import Settings
from llmplatform.services import health as health_service
from llmplatform.services import process


FIXED_NOW = dt.datetime(2026, 1, 30, 12, 0, 0, 123456, tzinfo=dt.timezone.utc)


def test_build_health_report_uses_settings_and_clock() -> None:
    settings = Settings(environment="staging", version="9.9.9")

    report = health_service.build_health_report(settings, now=lambda: FIXED_NOW)

    assert report.status == "healthy"
    assert report.timestamp == "2026-01-30T12:00:00.123Z"
    assert report.environment == "staging"
    assert report.version == "9.9.9"
    assert report.checks.memory.used <= report.checks.memory.total


def test_build_readiness_report_is_static() -> None:
    a = health_service.build_readiness_report(now=lambda: FIXED_NOW)
    b = health_service.build_readiness_report(now=lambda: FIXED_NOW)
    assert a == b
    assert a.checks.model_dump() == {
        "database": "ready",
        "redis": "ready",
        "external_apis": "ready",
        "file_system": "ready",
    }


def test_isoformat_z_treats_naive_as_utc() -> None:
    naive = dt.datetime(2026, 1, 30, 8, 30)
    assert health_service.isoformat_z(naive) == "2026-01-30T08:30:00.000Z"


def test_memory_snapshot_clamps_used_to_total(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        process,
        "memory_usage",
        lambda: process.MemoryUsage(used_bytes=300 * 1024 * 1024, total_bytes=200 * 1024 * 1024),
    )
    snapshot = health_service.memory_snapshot()
    assert snapshot.used == 300
    assert snapshot.total == 300


def test_memory_usage_without_procfs_reports_peak(
    monkeypatch: pytest.MonkeyPatch, tmp_path
) -> None:
    monkeypatch.setattr(process, "_STATM_PATH", tmp_path / "missing")
    usage = process.memory_usage()
    assert usage.used_bytes == usage.total_bytes
    assert usage.total_bytes > 0


def test_bytes_to_mb_rounds() -> None:
    assert process.bytes_to_mb(0) == 0
    assert process.bytes_to_mb(1024 * 1024 + 1) == 1
    assert process.bytes_to_mb(int(1.6 * 1024 * 1024)) == 2


def test_uptime_is_monotonic() -> None:
    first = process.uptime_seconds()
    second = process.uptime_seconds()
    assert 0 <= first <= second


def test_setup_logging_is_idempotent() -> None:
    settings = Settings(log_level="debug")
    setup_logging(settings)
    setup_logging(settings)

    root = logging.getLogger()
    installed = [h for h in root.handlers if h.get_name() == "llmplatform-stdout"]
    assert len(installed) == 1
    assert root.level == logging.DEBUG


def test_uptime_counts_from_process_start(
    monkeypatch: pytest.MonkeyPatch, tmp_path
) -> None:
    stat = tmp_path / "stat"
    # state, 18 unused fields, then starttime in clock ticks.
    stat.write_text("1234 (uvicorn worker) S " + " ".join(["0"] * 18 + ["500", "0"]))
    uptime = tmp_path / "uptime"
    uptime.write_text("60.00 120.00\n")

    monkeypatch.setattr(process, "_STAT_PATH", stat)
    monkeypatch.setattr(process, "_SYSTEM_UPTIME_PATH", uptime)
    monkeypatch.setattr(process.os, "sysconf", lambda name: 100)

    # Started 5s after boot, system up for 60s: 55s old.
    assert process._started_at(1000.0) == pytest.approx(945.0)


def test_uptime_without_procfs_counts_from_import(
    monkeypatch: pytest.MonkeyPatch, tmp_path
) -> None:
    monkeypatch.setattr(process, "_STAT_PATH", tmp_path / "missing")
    assert process._started_at(1000.0) == 1000.0

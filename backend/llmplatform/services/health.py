from __future__ import annotations

import datetime as dt
from typing import Callable, Literal

from pydantic import BaseModel

from llmplatform.core.settings import Settings
from llmplatform.services import process


HEALTH_FAILED_LABEL = "Health check failed"
READINESS_FAILED_LABEL = "Readiness check failed"

# Placeholder statuses: no dependency is probed yet.
_CONNECTED = "connected"
_READY = "ready"


class MemorySnapshot(BaseModel):
    used: int
    total: int


class HealthChecks(BaseModel):
    database: str
    redis: str
    memory: MemorySnapshot


class HealthReport(BaseModel):
    status: Literal["healthy", "unhealthy"]
    timestamp: str
    uptime: float
    environment: str
    version: str
    checks: HealthChecks


class ReadinessChecks(BaseModel):
    database: str
    redis: str
    external_apis: str
    file_system: str


class ReadinessReport(BaseModel):
    status: Literal["ready", "not_ready"]
    timestamp: str
    checks: ReadinessChecks


class FailureReport(BaseModel):
    status: Literal["unhealthy", "not_ready"]
    error: str
    timestamp: str


def utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


def isoformat_z(value: dt.datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=dt.timezone.utc)
    s = value.astimezone(dt.timezone.utc).isoformat(timespec="milliseconds")
    return s.removesuffix("+00:00") + "Z"


def memory_snapshot() -> MemorySnapshot:
    usage = process.memory_usage()
    used = process.bytes_to_mb(usage.used_bytes)
    total = process.bytes_to_mb(usage.total_bytes)
    return MemorySnapshot(used=used, total=max(total, used))


def build_health_report(
    settings: Settings,
    *,
    now: Callable[[], dt.datetime] = utcnow,
) -> HealthReport:
    return HealthReport(
        status="healthy",
        timestamp=isoformat_z(now()),
        uptime=process.uptime_seconds(),
        environment=settings.environment,
        version=settings.version,
        checks=HealthChecks(
            database=_CONNECTED,
            redis=_CONNECTED,
            memory=memory_snapshot(),
        ),
    )


def build_readiness_report(
    *,
    now: Callable[[], dt.datetime] = utcnow,
) -> ReadinessReport:
    return ReadinessReport(
        status="ready",
        timestamp=isoformat_z(now()),
        checks=ReadinessChecks(
            database=_READY,
            redis=_READY,
            external_apis=_READY,
            file_system=_READY,
        ),
    )


def health_failure() -> FailureReport:
    return FailureReport(
        status="unhealthy", error=HEALTH_FAILED_LABEL, timestamp=isoformat_z(utcnow())
    )


def readiness_failure() -> FailureReport:
    return FailureReport(
        status="not_ready", error=READINESS_FAILED_LABEL, timestamp=isoformat_z(utcnow())
    )

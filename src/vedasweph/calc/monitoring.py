#!/usr/bin/env python3
"""
Monitoring hooks for performance tracking and observability
Lightweight counters and timers plus Prometheus integration
"""

import threading
import time

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from prometheus_client import Counter, Gauge, Histogram

# ============================================================================
# METRICS STORAGE
# ============================================================================


@dataclass
class MetricStats:
    """Statistics for a single metric"""

    count: int = 0
    total_time: float = 0.0
    min_time: float = float("inf")
    max_time: float = 0.0
    last_time: float = 0.0
    errors: int = 0

    @property
    def avg_time(self) -> float:
        """Average time per call"""
        return self.total_time / self.count if self.count > 0 else 0.0

    def record(self, duration: float, error: bool = False):
        """Record a metric observation"""
        self.count += 1
        self.total_time += duration
        self.min_time = min(self.min_time, duration)
        self.max_time = max(self.max_time, duration)
        self.last_time = duration
        if error:
            self.errors += 1


# ============================================================================
# METRICS COLLECTOR
# ============================================================================


class MetricsCollector:
    """Thread-safe metrics collection"""

    def __init__(self):
        self._metrics: dict[str, MetricStats] = {}
        self._engine_failures: dict[str, int] = {}
        self._lock = threading.Lock()
        self._start_time = time.time()

    def record_timing(self, name: str, duration: float, error: bool = False):
        """Record a timing metric"""
        with self._lock:
            if name not in self._metrics:
                self._metrics[name] = MetricStats()
            self._metrics[name].record(duration, error)

    def record_engine_failure(self, operation: str):
        """Count an engine-reported failure per operation"""
        with self._lock:
            self._engine_failures[operation] = (
                self._engine_failures.get(operation, 0) + 1
            )

    def get_metrics(self) -> dict[str, Any]:
        """Get all metrics as a dictionary"""
        with self._lock:
            metrics_dict = {}
            for name, stats in self._metrics.items():
                metrics_dict[name] = {
                    "count": stats.count,
                    "total_time": stats.total_time,
                    "avg_time": stats.avg_time,
                    "min_time": stats.min_time if stats.count > 0 else 0,
                    "max_time": stats.max_time,
                    "last_time": stats.last_time,
                    "errors": stats.errors,
                    "error_rate": stats.errors / stats.count if stats.count > 0 else 0,
                }

            return {
                "uptime_seconds": time.time() - self._start_time,
                "metrics": metrics_dict,
                "engine_failures": self._engine_failures.copy(),
            }

    def reset(self):
        """Reset all metrics"""
        with self._lock:
            self._metrics.clear()
            self._engine_failures.clear()
            self._start_time = time.time()


# Global metrics collector instance
_collector = MetricsCollector()

# ============================================================================
# CONTEXT MANAGERS
# ============================================================================


class Timer:
    """Context manager for timing code blocks

    Usage:
        with Timer("moon_data"):
            ...
    """

    def __init__(self, name: str):
        self.name = name
        self.start = None

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = time.perf_counter() - self.start
        _collector.record_timing(self.name, duration, exc_type is not None)


# ============================================================================
# PUBLIC API
# ============================================================================


def get_metrics() -> dict[str, Any]:
    """Get current metrics snapshot"""
    return _collector.get_metrics()


def reset_metrics():
    """Reset all metrics"""
    _collector.reset()


# ============================================================================
# PROMETHEUS INTEGRATION
# ============================================================================

_prometheus_ready = False
_prom_lock = threading.Lock()

prom_request_count: Counter | None = None
prom_request_duration: Histogram | None = None
prom_engine_failures: Counter | None = None
prom_uptime: Gauge | None = None


def setup_prometheus_metrics() -> bool:
    """Register Prometheus collectors once per process

    Metrics are exposed by the API's /metrics endpoint via generate_latest.
    """
    global _prometheus_ready, prom_request_count, prom_request_duration
    global prom_engine_failures, prom_uptime

    with _prom_lock:
        if _prometheus_ready:
            return True

        prom_request_count = Counter(
            "vedasweph_requests_total",
            "Total requests",
            ["endpoint", "status"],
        )
        prom_request_duration = Histogram(
            "vedasweph_request_duration_seconds",
            "Request duration",
            ["endpoint"],
            buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
        )
        prom_engine_failures = Counter(
            "vedasweph_engine_failures_total",
            "Engine-reported failures",
            ["operation"],
        )
        prom_uptime = Gauge("vedasweph_uptime_seconds", "Application uptime")
        prom_uptime.set_function(lambda: time.time() - _collector._start_time)

        _prometheus_ready = True
        return True


# ============================================================================
# TRACKING HELPERS
# ============================================================================


@contextmanager
def track_request(endpoint: str):
    """Track an API request"""
    start = time.perf_counter()
    status = "success"
    try:
        yield
    except Exception:
        status = "error"
        raise
    finally:
        duration = time.perf_counter() - start
        _collector.record_timing(f"request.{endpoint}", duration, status == "error")
        if prom_request_duration is not None:
            prom_request_duration.labels(endpoint=endpoint).observe(duration)
        if prom_request_count is not None:
            prom_request_count.labels(endpoint=endpoint, status=status).inc()


@contextmanager
def track_computation(name: str):
    """Track a computation"""
    with Timer(name):
        yield


def track_engine_failure(operation: str):
    """Track an engine-reported failure"""
    _collector.record_engine_failure(operation)
    if prom_engine_failures is not None:
        prom_engine_failures.labels(operation=operation).inc()

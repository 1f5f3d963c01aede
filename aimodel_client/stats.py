"""
Statistics tracking for model invocations.

Invocations may run concurrently from several threads, so every record_* call
and snapshot takes the instance lock.
"""
import statistics
import threading
import time
from collections import deque
from dataclasses import dataclass, field
from typing import Optional

from .provider import InvocationOutcome


@dataclass
class InvocationStats:
    """Counters and latency window for model invocations."""

    latency_window: int = 1000  # Keep last N latencies for percentiles

    start_time: float = field(default_factory=time.time)

    total_requests: int = 0
    outcomes: dict = field(default_factory=lambda: {o.value: 0 for o in InvocationOutcome})

    latencies: deque = field(init=False)
    min_latency_ms: Optional[float] = None
    max_latency_ms: Optional[float] = None  # High watermark

    total_tokens: int = 0

    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __post_init__(self):
        self.latencies = deque(maxlen=self.latency_window)

    def record(
        self,
        outcome: InvocationOutcome,
        latency_ms: float,
        tokens_used: Optional[int] = None,
    ):
        """Record a completed invocation."""
        with self._lock:
            self.total_requests += 1
            self.outcomes[outcome.value] += 1

            self.latencies.append(latency_ms)
            if self.min_latency_ms is None or latency_ms < self.min_latency_ms:
                self.min_latency_ms = latency_ms
            if self.max_latency_ms is None or latency_ms > self.max_latency_ms:
                self.max_latency_ms = latency_ms

            if tokens_used is not None:
                self.total_tokens += tokens_used

    def get_percentile(self, p: float) -> Optional[float]:
        """Get latency percentile (0-100)."""
        if not self.latencies:
            return None
        sorted_latencies = sorted(self.latencies)
        idx = int(len(sorted_latencies) * p / 100)
        idx = min(idx, len(sorted_latencies) - 1)
        return sorted_latencies[idx]

    def snapshot(self, provider: str, default_model: Optional[str] = None) -> dict:
        with self._lock:
            latency_stats = {
                "avg": None,
                "min": self.min_latency_ms,
                "max": self.max_latency_ms,
                "p50": None,
                "p95": None,
                "p99": None,
            }
            if self.latencies:
                latency_stats["avg"] = round(statistics.mean(self.latencies), 1)
                latency_stats["p50"] = round(self.get_percentile(50), 1)
                latency_stats["p95"] = round(self.get_percentile(95), 1)
                latency_stats["p99"] = round(self.get_percentile(99), 1)

            return {
                "uptime_seconds": round(time.time() - self.start_time, 1),
                "requests": {
                    "total": self.total_requests,
                    **self.outcomes,
                },
                "latency_ms": latency_stats,
                "tokens": {"total": self.total_tokens},
                "model": {
                    "provider": provider,
                    "default": default_model,
                },
            }


# Singleton instance
_stats: Optional[InvocationStats] = None


def get_stats() -> InvocationStats:
    """Get the global stats instance."""
    global _stats
    if _stats is None:
        _stats = InvocationStats()
    return _stats


def reset_stats() -> None:
    global _stats
    _stats = None

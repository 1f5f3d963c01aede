import threading

from aimodel_client.provider import InvocationOutcome
from aimodel_client.stats import InvocationStats, get_stats, reset_stats


def test_empty_snapshot():
    snapshot = InvocationStats().snapshot(provider="azure")

    assert snapshot["requests"]["total"] == 0
    assert snapshot["latency_ms"]["avg"] is None
    assert snapshot["model"] == {"provider": "azure", "default": None}


def test_records_outcomes_latency_and_tokens():
    stats = InvocationStats()
    stats.record(InvocationOutcome.SUCCESS, 100, tokens_used=40)
    stats.record(InvocationOutcome.SUCCESS, 300, tokens_used=2)
    stats.record(InvocationOutcome.CONTEXT_LENGTH_EXCEEDED, 50)

    snapshot = stats.snapshot(provider="azure", default_model="GPT_4O")

    assert snapshot["requests"]["total"] == 3
    assert snapshot["requests"]["success"] == 2
    assert snapshot["requests"]["context_length_exceeded"] == 1
    assert snapshot["requests"]["failed"] == 0
    assert snapshot["latency_ms"]["min"] == 50
    assert snapshot["latency_ms"]["max"] == 300
    assert snapshot["latency_ms"]["avg"] == 150.0
    assert snapshot["tokens"]["total"] == 42


def test_latency_window_is_bounded():
    stats = InvocationStats(latency_window=2)
    for latency in (10, 20, 30):
        stats.record(InvocationOutcome.SUCCESS, latency)

    assert list(stats.latencies) == [20, 30]
    assert stats.min_latency_ms == 10


def test_global_instance_is_shared_until_reset():
    assert get_stats() is get_stats()
    first = get_stats()
    reset_stats()
    assert get_stats() is not first


def test_concurrent_records_are_not_lost():
    stats = InvocationStats()

    def worker(outcome):
        for _ in range(500):
            stats.record(outcome, 5, tokens_used=1)

    threads = [
        threading.Thread(target=worker, args=(outcome,))
        for outcome in (InvocationOutcome.SUCCESS, InvocationOutcome.FAILED) * 4
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    snapshot = stats.snapshot(provider="azure")
    assert snapshot["requests"]["total"] == 4000
    assert snapshot["requests"]["success"] == 2000
    assert snapshot["requests"]["failed"] == 2000
    assert snapshot["tokens"]["total"] == 4000

"""Tests for SingletonRegistry and get_singleton."""

import threading
import time

import pytest

from pattern_catalog.infrastructure.patterns import SingletonRegistry, get_singleton


class Counter:
    created = 0

    def __init__(self, start: int = 0):
        Counter.created += 1
        self.value = start


class SlowCounter:
    created = 0

    def __init__(self):
        SlowCounter.created += 1
        time.sleep(0.05)


class Other:
    pass


@pytest.fixture(autouse=True)
def reset_counters():
    Counter.created = 0
    SlowCounter.created = 0


@pytest.mark.unit
class TestSingletonRegistry:
    """Test cases for the singleton registry."""

    def test_registry_is_singleton(self):
        assert SingletonRegistry() is SingletonRegistry.get_instance()

    def test_get_singleton_returns_same_instance(self):
        first = get_singleton(Counter, 5)
        second = get_singleton(Counter, 99)

        assert first is second
        assert first.value == 5
        assert Counter.created == 1

    def test_reset_single_class(self):
        registry = SingletonRegistry.get_instance()
        counter = get_singleton(Counter)
        other = get_singleton(Other)

        registry.reset(Counter)

        assert get_singleton(Counter) is not counter
        assert get_singleton(Other) is other
        assert Counter.created == 2

    def test_reset_all(self):
        counter = get_singleton(Counter)

        SingletonRegistry.get_instance().reset()

        assert get_singleton(Counter) is not counter

    def test_failed_construction_is_not_cached(self):
        class Broken:
            attempts = 0

            def __init__(self):
                Broken.attempts += 1
                raise RuntimeError("boom")

        for _ in range(2):
            with pytest.raises(RuntimeError):
                get_singleton(Broken)

        assert Broken.attempts == 2

    def test_concurrent_access_creates_once(self):
        thread_count = 12
        barrier = threading.Barrier(thread_count)
        results = []
        results_lock = threading.Lock()

        def access():
            barrier.wait()
            instance = get_singleton(SlowCounter)
            with results_lock:
                results.append(instance)

        threads = [threading.Thread(target=access) for _ in range(thread_count)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert SlowCounter.created == 1
        assert len(results) == thread_count
        assert len({id(instance) for instance in results}) == 1

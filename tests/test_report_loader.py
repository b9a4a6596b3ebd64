"""Tests for the one-at-a-time report loader."""

import threading

import pytest

from core.report_loader import LatestRangeLoader


class ManualSpawn:
    """Holds the worker instead of starting a thread, so tests decide when it runs."""

    def __init__(self):
        self.workers = []

    def __call__(self, target):
        self.workers.append(target)


class TestLatestRangeLoader:
    def test_first_request_starts_worker(self):
        loaded, spawn = [], ManualSpawn()
        loader = LatestRangeLoader(loaded.append, spawn=spawn)
        assert loader.request("march")
        assert loader.is_loading
        spawn.workers[0]()
        assert loaded == ["march"]
        assert not loader.is_loading

    def test_range_picked_mid_load_is_loaded_next(self):
        spawn = ManualSpawn()
        loaded = []

        def load(value):
            loaded.append(value)
            if value == "march":
                # user picks another range while march is still loading
                assert not loader.request("april")

        loader = LatestRangeLoader(load, spawn=spawn)
        loader.request("march")
        spawn.workers[0]()
        assert loaded == ["march", "april"]
        assert len(spawn.workers) == 1
        assert not loader.is_loading

    def test_only_newest_of_queued_ranges_is_loaded(self):
        spawn = ManualSpawn()
        loaded = []

        def load(value):
            loaded.append(value)
            if value == "march":
                loader.request("april")
                loader.request("may")

        loader = LatestRangeLoader(load, spawn=spawn)
        loader.request("march")
        spawn.workers[0]()
        assert loaded == ["march", "may"]

    def test_new_worker_after_idle(self):
        loaded, spawn = [], ManualSpawn()
        loader = LatestRangeLoader(loaded.append, spawn=spawn)
        loader.request("march")
        spawn.workers[0]()
        assert loader.request("april")
        spawn.workers[1]()
        assert loaded == ["march", "april"]

    def test_failed_load_releases_loader(self):
        spawn = ManualSpawn()

        def load(value):
            raise RuntimeError("database unavailable")

        loader = LatestRangeLoader(load, spawn=spawn)
        loader.request("march")
        with pytest.raises(RuntimeError):
            spawn.workers[0]()
        assert not loader.is_loading
        assert loader.request("march")

    def test_default_spawn_uses_thread(self):
        done = threading.Event()
        loaded = []

        def load(value):
            loaded.append(value)
            done.set()

        LatestRangeLoader(load).request("march")
        assert done.wait(timeout=5)
        assert loaded == ["march"]

# core/report_loader.py
"""
Runs report loads on a background thread, one at a time.

A range picked while a load is still running is not dropped: the worker
picks it up as soon as the current load returns, so the last range asked
for is always the last one loaded.
"""
import threading


def _spawn_daemon(target):
    threading.Thread(target=target, daemon=True).start()


class LatestRangeLoader:
    def __init__(self, load, spawn=None):
        self._load = load
        self._spawn = spawn or _spawn_daemon
        self._lock = threading.Lock()
        self._running = False
        self._pending = False
        self._wanted = None

    @property
    def is_loading(self):
        return self._running

    def request(self, value):
        """
        Ask for `value` to be loaded.
        Returns: True if a new worker was started, False if the running one will pick it up
        """
        with self._lock:
            self._wanted = value
            if self._running:
                self._pending = True
                return False
            self._running = True
            self._pending = False
        self._spawn(self._run)
        return True

    def _run(self):
        try:
            while True:
                with self._lock:
                    value = self._wanted
                    self._pending = False
                self._load(value)
                with self._lock:
                    if not self._pending:
                        self._running = False
                        return
        except Exception:
            with self._lock:
                self._running = False
                self._pending = False
            raise

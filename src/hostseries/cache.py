# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Values computed once per process."""

from contextlib import contextmanager
import threading


class ComputedValue:
    """A shared value computed on first access.

    The computation runs at most once, however many threads ask for the value
    at the same time: callers racing on the first access wait until it's
    done and then all get the same value.

    `clear_cached` and `override` exist for tests only. Calling them while
    other threads read the value races with those readers.
    """

    def __init__(self, compute):
        self._compute = compute
        self._value = None
        self._computed = False
        self._lock = threading.Lock()

    def get(self):
        """Return the value, computing it if needed."""
        with self._lock:
            if not self._computed:
                self._value = self._compute()
                self._computed = True
            return self._value

    def clear_cached(self):
        """Clear cached value so that next get call computes it again."""
        with self._lock:
            self._value = None
            self._computed = False

    @contextmanager
    def override(self, compute):
        """Context manager: temporarily compute the value with `compute`.

        The cached value is cleared on entry and on exit, so the override and
        whatever comes after it both start from a fresh computation.
        """
        with self._lock:
            prior_compute = self._compute
            self._compute = compute
        self.clear_cached()
        try:
            yield self
        finally:
            with self._lock:
                self._compute = prior_compute
            self.clear_cached()

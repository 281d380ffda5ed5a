"""Explicit memo table for solid base results with compute-once-per-key semantics."""

import threading
from collections.abc import Callable, Iterable
from typing import Optional

from solid_base_linter.domain.entities import SolidBaseResult
from solid_base_linter.domain.exceptions import ResolutionCycleError


class SolidBaseCache:
    """
    Thread-safe cache keyed by class key.

    Protocol per key: claim, compute outside the lock, publish, wake waiters.
    Concurrent callers for a claimed key wait for the published value, so every
    caller observes the same result. A caller that re-enters a key it already
    claimed (directly or through a chain of waiting threads) gets
    ResolutionCycleError instead of looping or deadlocking.
    """

    def __init__(self) -> None:
        self._results: dict[str, SolidBaseResult] = {}
        self._claims: dict[str, int] = {}
        self._waiting: dict[int, str] = {}
        self._cond = threading.Condition()

    def __contains__(self, key: object) -> bool:
        return key in self._results

    def __len__(self) -> int:
        return len(self._results)

    def peek(self, key: str) -> Optional[SolidBaseResult]:
        """Return the published result for key without computing."""
        return self._results.get(key)

    def is_claimed(self, key: str) -> bool:
        with self._cond:
            return key in self._claims

    def get_or_compute(self, key: str, compute: Callable[[], SolidBaseResult]) -> SolidBaseResult:
        me = threading.get_ident()
        with self._cond:
            while True:
                cached = self._results.get(key)
                if cached is not None:
                    return cached
                owner = self._claims.get(key)
                if owner is None:
                    self._claims[key] = me
                    break
                if owner == me or self._closes_wait_cycle(me, owner):
                    raise ResolutionCycleError(key)
                self._waiting[me] = key
                try:
                    self._cond.wait()
                finally:
                    del self._waiting[me]

        try:
            result = compute()
        except BaseException:
            with self._cond:
                self._claims.pop(key, None)
                self._cond.notify_all()
            raise

        with self._cond:
            published = self._results.setdefault(key, result)
            self._claims.pop(key, None)
            self._cond.notify_all()
        return published

    def invalidate(self, keys: Iterable[str]) -> None:
        """Evict results for keys. Claims in flight are left to finish."""
        with self._cond:
            for key in keys:
                self._results.pop(key, None)

    def _closes_wait_cycle(self, me: int, owner: int) -> bool:
        # Follow owner -> key it waits on -> that key's owner until the chain ends.
        seen: set[int] = set()
        current: Optional[int] = owner
        while current is not None and current not in seen:
            if current == me:
                return True
            seen.add(current)
            waited_key = self._waiting.get(current)
            current = self._claims.get(waited_key) if waited_key is not None else None
        return False

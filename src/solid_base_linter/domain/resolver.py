"""SolidBaseResolver: memoized computation of each class's unique solid base."""

import logging
import threading
from typing import Optional

from solid_base_linter.domain.entities import InvalidReason, SolidBaseResult
from solid_base_linter.domain.exceptions import ResolutionCycleError
from solid_base_linter.domain.protocols import ClassHierarchyProtocol
from solid_base_linter.domain.solid_base_cache import SolidBaseCache
from solid_base_linter.domain.solidness import SolidnessOracle

logger = logging.getLogger(__name__)


class SolidBaseResolver:
    """
    Computes solid_base_of(class) bottom-up over the hierarchy DAG.

    The result depends only on the direct bases' results. Each direct base
    contributes a candidate (the base itself when intrinsically solid, else the
    base's own solid base); the class's solid base is the unique most-derived
    candidate, or Invalid when two candidates are incomparable. Results are
    published to the cache before being returned.
    """

    def __init__(
        self,
        hierarchy: ClassHierarchyProtocol,
        oracle: SolidnessOracle,
        cache: Optional[SolidBaseCache] = None,
    ) -> None:
        self._hierarchy = hierarchy
        self._oracle = oracle
        self._cache = cache if cache is not None else SolidBaseCache()
        self._cycles: set[str] = set()
        self._cycles_lock = threading.Lock()

    @property
    def cache(self) -> SolidBaseCache:
        return self._cache

    @property
    def cycles(self) -> frozenset[str]:
        """Keys at which an unexpected cycle was detected. Empty for a sound hierarchy."""
        with self._cycles_lock:
            return frozenset(self._cycles)

    def solid_base_of(self, key: str) -> SolidBaseResult:
        cached = self._cache.peek(key)
        if cached is not None:
            return cached
        try:
            return self._cache.get_or_compute(key, lambda: self._compute(key))
        except ResolutionCycleError:
            return self._cycle_result(key)

    def resolve_bases(self, key: str) -> SolidBaseResult:
        """
        Resolve key's solid base from its direct bases only, ignoring whether key
        itself is intrinsically solid. Not cached under key.

        Used to detect conflicting bases on a class that is itself a solid base.
        """
        bases = self._hierarchy.direct_bases(key)
        if not bases:
            root = self._hierarchy.root_key
            return SolidBaseResult.resolved(key, root, (root,))

        candidates: list[str] = []
        for base in bases:
            candidate = self._candidate_for(base)
            if isinstance(candidate, SolidBaseResult):
                reason = InvalidReason.CYCLE if candidate.is_cycle else InvalidReason.INVALID_BASE
                return SolidBaseResult.invalid(
                    key, reason, tuple(candidates), invalid_base=base
                )
            if candidate not in candidates:
                candidates.append(candidate)

        if len(candidates) == 1:
            return SolidBaseResult.resolved(key, candidates[0], tuple(candidates))

        winner = self._most_derived(candidates)
        if winner is None:
            return SolidBaseResult.invalid(
                key, InvalidReason.INCOMPATIBLE_BASES, tuple(candidates)
            )
        return SolidBaseResult.resolved(key, winner, tuple(candidates))

    def _compute(self, key: str) -> SolidBaseResult:
        if self._oracle.is_intrinsically_solid(key):
            return SolidBaseResult.resolved(key, key)
        return self.resolve_bases(key)

    def _candidate_for(self, base: str) -> "str | SolidBaseResult":
        """Candidate solid base contributed by one direct base, or the Invalid result that blocks it."""
        if self._oracle.is_intrinsically_solid(base):
            return base
        result = self.solid_base_of(base)
        if result.solid_base is None:
            return result
        return result.solid_base

    def _most_derived(self, candidates: list[str]) -> Optional[str]:
        winners = [
            candidate
            for candidate in candidates
            if all(
                self._hierarchy.is_subclass(candidate, other)
                for other in candidates
                if other != candidate
            )
        ]
        # Two distinct winners would mean mutual subclassing, i.e. a broken order.
        if len(winners) != 1:
            return None
        return winners[0]

    def _cycle_result(self, key: str) -> SolidBaseResult:
        with self._cycles_lock:
            self._cycles.add(key)
        logger.error(
            "Internal error: cyclic class hierarchy reached '%s' during solid base resolution.",
            key,
        )
        return SolidBaseResult.invalid(key, InvalidReason.CYCLE)

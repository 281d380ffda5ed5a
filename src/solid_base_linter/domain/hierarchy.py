"""In-memory class hierarchy snapshot: direct bases, subclass queries, invalidation."""

import threading
from collections.abc import Iterator
from dataclasses import replace

from solid_base_linter.domain.constants import UNIVERSAL_ROOT
from solid_base_linter.domain.entities import ClassNode
from solid_base_linter.domain.exceptions import UnknownClassError
from solid_base_linter.domain.protocols import ClassHierarchyProtocol, InvalidationListener


class ClassHierarchy(ClassHierarchyProtocol):
    """
    Append-only (per session) registry of class declarations.

    Edges point child -> base. A class declared without bases implicitly
    derives from the universal root, which is registered on construction.
    Amending a declaration notifies listeners with the amended key and all of
    its transitive descendants so dependent caches can evict them.
    """

    def __init__(self, root_key: str = UNIVERSAL_ROOT) -> None:
        self._root_key = root_key
        self._nodes: dict[str, ClassNode] = {root_key: ClassNode(key=root_key, is_root=True)}
        self._subclasses: dict[str, set[str]] = {}
        self._ancestors: dict[str, frozenset[str]] = {}
        self._listeners: list[InvalidationListener] = []
        self._lock = threading.RLock()

    @property
    def root_key(self) -> str:
        return self._root_key

    def __contains__(self, key: object) -> bool:
        return key in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._nodes))

    def add_invalidation_listener(self, listener: InvalidationListener) -> None:
        """Subscribe to amendments. listener receives the evicted key set."""
        self._listeners.append(listener)

    def node(self, key: str) -> ClassNode:
        try:
            return self._nodes[key]
        except KeyError:
            raise UnknownClassError(key) from None

    def direct_bases(self, key: str) -> tuple[str, ...]:
        return self.node(key).bases

    def direct_subclasses(self, key: str) -> frozenset[str]:
        with self._lock:
            return frozenset(self._subclasses.get(key, ()))

    def register(self, node: ClassNode) -> bool:
        """
        Record a declaration. Returns True if the hierarchy changed.

        Re-registering an identical declaration is a no-op; registering a
        different declaration under an existing key is an amendment.
        """
        if node.key == self._root_key and not node.is_root:
            node = replace(node, is_root=True, bases=())
        with self._lock:
            existing = self._nodes.get(node.key)
            if existing == node:
                return False
            if existing is None:
                self._nodes[node.key] = node
                self._link(node)
                return True
            affected = self._descendants_including(node.key)
            self._unlink(existing)
            self._nodes[node.key] = node
            self._link(node)
            for key in affected:
                self._ancestors.pop(key, None)
        self._notify(affected)
        return True

    def amend(self, node: ClassNode) -> frozenset[str]:
        """Replace an existing declaration. Returns the invalidated key set."""
        with self._lock:
            if node.key not in self._nodes:
                raise UnknownClassError(node.key)
            affected = self._descendants_including(node.key)
        self.register(node)
        return affected

    def descendants(self, key: str) -> frozenset[str]:
        """Transitive subclasses of key, key excluded."""
        with self._lock:
            return self._descendants_including(key) - {key}

    def ancestors(self, key: str) -> frozenset[str]:
        """All ancestors of key including key itself and the universal root."""
        cached = self._ancestors.get(key)
        if cached is not None:
            return cached
        with self._lock:
            result: set[str] = {self._root_key}
            stack = [key]
            while stack:
                current = stack.pop()
                if current in result:
                    continue
                result.add(current)
                stack.extend(self.node(current).bases)
            frozen = frozenset(result)
            self._ancestors[key] = frozen
            return frozen

    def is_subclass(self, sub: str, sup: str) -> bool:
        if sub == sup:
            self.node(sub)
            return True
        return sup in self.ancestors(sub)

    def _link(self, node: ClassNode) -> None:
        for base in node.bases:
            self._subclasses.setdefault(base, set()).add(node.key)

    def _unlink(self, node: ClassNode) -> None:
        for base in node.bases:
            children = self._subclasses.get(base)
            if children is not None:
                children.discard(node.key)

    def _descendants_including(self, key: str) -> frozenset[str]:
        seen: set[str] = set()
        stack = [key]
        while stack:
            current = stack.pop()
            if current in seen:
                continue
            seen.add(current)
            stack.extend(self._subclasses.get(current, ()))
        return frozenset(seen)

    def _notify(self, keys: frozenset[str]) -> None:
        for listener in list(self._listeners):
            listener(keys)

"""
Dependency tracking between emitted type aliases.

Nodes are resolved type names; an edge ``(dependent, dependency)`` means the
dependent's body mentions the dependency. The graph is built while
definitions are rendered and frozen before ordering.
"""

from typing import Dict, Iterator, List

from .errors import GraphFrozenError
from ...logging_config import get_logger

logger = get_logger(__name__)


class DependencyGraph:
    """Directed graph of type aliases with a deterministic overall order."""

    def __init__(self):
        # Dicts keep registration order, which drives every traversal
        self._edges: Dict[str, Dict[str, None]] = {}
        self._frozen = False

    def add_node(self, name: str) -> None:
        """Register a type. Registering twice is a no-op."""
        self._check_mutable()
        self._edges.setdefault(name, {})

    def add_dependency(self, dependent: str, dependency: str) -> None:
        """
        Record that ``dependent`` mentions ``dependency``.

        Self references are ignored. Unknown endpoints are registered as nodes.
        """
        self._check_mutable()
        if dependent == dependency:
            return
        self._edges.setdefault(dependent, {})[dependency] = None
        self._edges.setdefault(dependency, {})

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            raise GraphFrozenError("Dependency graph is frozen")

    def nodes(self) -> List[str]:
        return list(self._edges)

    def dependencies_of(self, name: str) -> List[str]:
        return list(self._edges.get(name, ()))

    def __contains__(self, name: object) -> bool:
        return name in self._edges

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[str]:
        return iter(self._edges)

    def overall_order(self) -> List[str]:
        """
        Order every node so dependencies come before their dependents.

        Walks depth-first from each node in registration order, emitting a
        node once all of its dependencies are emitted. When a dependency is
        already on the walk stack the edge closes a cycle and is skipped, so
        the cycle member reached first is emitted after the others.

        The walk keeps its own stack, so reference chains of any depth are
        ordered without hitting the interpreter's recursion limit.

        Returns:
            Every node exactly once
        """
        visited = set()
        visiting = set()
        ordered = []

        for root in self._edges:
            if root in visited:
                continue

            visiting.add(root)
            stack = [(root, iter(self._edges[root]))]

            while stack:
                name, dependencies = stack[-1]

                for dependency in dependencies:
                    if dependency in visited:
                        continue
                    if dependency in visiting:
                        # Circular dependency - skip to avoid infinite loop
                        logger.debug("Cycle detected while ordering at %s", dependency)
                        continue
                    visiting.add(dependency)
                    stack.append((dependency, iter(self._edges[dependency])))
                    break
                else:
                    stack.pop()
                    visiting.discard(name)
                    visited.add(name)
                    ordered.append(name)

        return ordered

    def find_cycles(self) -> List[List[str]]:
        """
        Find strongly connected groups of two or more nodes.

        Tarjan's algorithm, driven by an explicit stack of edge iterators.

        Returns:
            One list per cycle, members in registration order
        """
        index_of: Dict[str, int] = {}
        lowlink: Dict[str, int] = {}
        stack: List[str] = []
        on_stack = set()
        components: List[List[str]] = []
        position = {name: i for i, name in enumerate(self._edges)}

        def enter(name: str) -> None:
            index_of[name] = lowlink[name] = len(index_of)
            stack.append(name)
            on_stack.add(name)

        for root in self._edges:
            if root in index_of:
                continue

            enter(root)
            work = [(root, iter(self._edges[root]))]

            while work:
                name, dependencies = work[-1]

                for dependency in dependencies:
                    if dependency not in index_of:
                        enter(dependency)
                        work.append((dependency, iter(self._edges[dependency])))
                        break
                    if dependency in on_stack:
                        lowlink[name] = min(lowlink[name], index_of[dependency])
                else:
                    work.pop()
                    if work:
                        parent = work[-1][0]
                        lowlink[parent] = min(lowlink[parent], lowlink[name])

                    if lowlink[name] == index_of[name]:
                        component = []
                        while True:
                            member = stack.pop()
                            on_stack.discard(member)
                            component.append(member)
                            if member == name:
                                break
                        if len(component) > 1:
                            components.append(sorted(component, key=position.__getitem__))

        components.sort(key=lambda c: position[c[0]])
        return components

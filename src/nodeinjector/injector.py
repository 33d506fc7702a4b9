"""The resolution engine: builds nodes by name, injecting their dependencies."""

import functools
import logging
import threading
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, List, Mapping, Optional

from nodeinjector.exceptions import CannotConstruct, CyclicDependencyError, NodeNotFound
from nodeinjector.parameters import classify, required_keyword, required_positional
from nodeinjector.registry import NodeRegistry

logger = logging.getLogger(__name__)


class Injector:
    """Builds objects by matching constructor parameter names to node names.

    Every required parameter of an internal node is filled by resolving the
    node with the same name, recursively. Parameters with defaults and
    ``*args``/``**kwargs`` are left alone. Each node is built at most once
    per injector; later requests get the cached value.

    Args:
        internal_nodes: Node name to class (or factory) to build.
        leaf_nodes: Node name to zero-argument provider, injected as-is.
        detect_cycles: When true (default), requesting a node that is
            already being built raises ``CyclicDependencyError``. When
            false, a cycle recurses until Python raises ``RecursionError``.

    Raises:
        DuplicateNameError: If a name is both an internal and a leaf node.

    Examples:
        >>> class Bar:
        ...     def __init__(self, foo):
        ...         self.foo = foo
        >>> injector = Injector(internal_nodes={"bar": Bar}, leaf_nodes={"foo": lambda: 1})
        >>> injector.resolve("bar").foo
        1
        >>> injector.resolve("bar") is injector.resolve("bar")
        True
    """

    def __init__(
        self,
        internal_nodes: Optional[Mapping[str, Callable[..., Any]]] = None,
        leaf_nodes: Optional[Mapping[str, Callable[[], Any]]] = None,
        *,
        detect_cycles: bool = True,
    ) -> None:
        self._registry = NodeRegistry(internal_nodes, leaf_nodes)
        self._detect_cycles = detect_cycles
        self._cache: Dict[str, Any] = {}
        self._resolving: List[str] = []
        # Held for a whole top-level resolution and re-entered by the recursion.
        self._lock = threading.RLock()
        self._accessors = MappingProxyType(
            {name: functools.partial(self.resolve, name) for name in sorted(self._registry.all_names)}
        )

    @property
    def registry(self) -> NodeRegistry:
        return self._registry

    def supported_names(self) -> FrozenSet[str]:
        """Return every name this injector can resolve.

        Examples:
            >>> sorted(Injector({"a": object}, {"b": lambda: 2}).supported_names())
            ['a', 'b']
        """
        return self._registry.all_names

    def supports(self, name: str) -> bool:
        return name in self._registry

    def accessors(self) -> Mapping[str, Callable[[], Any]]:
        """Return a read-only mapping of node name to a resolving callable.

        Examples:
            >>> injector = Injector(leaf_nodes={"port": lambda: 8080})
            >>> injector.accessors()["port"]()
            8080
        """
        return self._accessors

    def resolve(self, name: str) -> Any:
        """Build (or fetch from cache) the node called *name*.

        Leaf nodes are produced by calling their provider. Internal nodes are
        produced by resolving every required parameter of their constructor
        as a node of the same name, then calling the constructor. The result
        is cached either way.

        Args:
            name: The node to resolve.

        Returns:
            The built value.

        Raises:
            NodeNotFound: If *name* is not registered.
            CannotConstruct: If a dependency of *name* could not be built;
                the message has one line per level of the failed chain.
            CyclicDependencyError: If *name* depends on itself and cycle
                detection is on.
        """
        with self._lock:
            if name in self._cache:
                logger.debug("Node %s served from cache", name)
                return self._cache[name]

            if self._detect_cycles and name in self._resolving:
                start = self._resolving.index(name)
                raise CyclicDependencyError(self._resolving[start:] + [name])

            if self._detect_cycles:
                self._resolving.append(name)
            try:
                provider = self._registry.lookup_leaf(name)
                if provider is not None:
                    logger.debug("Providing leaf node %s", name)
                    value = provider()
                else:
                    value = self._construct(name)
            finally:
                if self._detect_cycles:
                    self._resolving.pop()

            self._cache[name] = value
            return value

    def _construct(self, name: str) -> Any:
        target = self._registry.lookup_internal(name)
        if target is None:
            raise NodeNotFound(name)

        try:
            instance = self._call(target)
        except (NodeNotFound, CannotConstruct) as exc:
            raise CannotConstruct.wrap(exc, name) from exc

        logger.debug("Created node %s (%s)", name, type(instance).__name__)
        return instance

    def invoke(self, fn: Callable[..., Any]) -> Any:
        """Call *fn* with its required parameters resolved as nodes.

        Unlike ``resolve``, the return value is not cached, since *fn* is
        not addressed by a node name.

        Examples:
            >>> injector = Injector(leaf_nodes={"x": lambda: 2, "y": lambda: 3})
            >>> injector.invoke(lambda x, y, z=10: x * y + z)
            16
        """
        with self._lock:
            return self._call(fn)

    def _call(self, target: Callable[..., Any]) -> Any:
        descriptors = classify(target)
        args = [self.resolve(param) for param in required_positional(descriptors)]
        kwargs = {param: self.resolve(param) for param in required_keyword(descriptors)}
        return target(*args, **kwargs)

    def __repr__(self) -> str:
        return f"Injector({self._registry!r}, cached={sorted(self._cache)})"

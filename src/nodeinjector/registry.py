"""The two node namespaces an injector resolves from."""

from types import MappingProxyType
from typing import Any, Callable, FrozenSet, Mapping, Optional

from nodeinjector.exceptions import DuplicateNameError, RegistrationError


class NodeRegistry:
    """Holds internal nodes and leaf nodes, keyed by name.

    Internal nodes are classes (or factories) whose required parameters are
    resolved from other nodes. Leaf nodes are zero-argument providers whose
    result is injected as-is. A name may live in only one of the two
    namespaces. The registry is read-only once created.

    Args:
        internal_nodes: Node name to constructible callable.
        leaf_nodes: Node name to zero-argument provider.

    Raises:
        DuplicateNameError: If a name appears in both mappings.
        RegistrationError: If a registered value is not callable.

    Examples:
        >>> registry = NodeRegistry({"bar": dict}, {"foo": lambda: 1})
        >>> sorted(registry.all_names)
        ['bar', 'foo']
        >>> registry.lookup_leaf("foo")()
        1
        >>> registry.lookup_internal("foo") is None
        True
    """

    def __init__(
        self,
        internal_nodes: Optional[Mapping[str, Callable[..., Any]]] = None,
        leaf_nodes: Optional[Mapping[str, Callable[[], Any]]] = None,
    ) -> None:
        internal = dict(internal_nodes or {})
        leaves = dict(leaf_nodes or {})

        duplicates = internal.keys() & leaves.keys()
        if duplicates:
            raise DuplicateNameError(duplicates)

        for label, nodes in (("Internal", internal), ("Leaf", leaves)):
            for name, target in nodes.items():
                if not callable(target):
                    raise RegistrationError(
                        f"{label} node '{name}' must be callable, got {type(target).__name__}"
                    )

        self._internal_nodes = MappingProxyType(internal)
        self._leaf_nodes = MappingProxyType(leaves)
        self._all_names = frozenset(internal) | frozenset(leaves)

    @property
    def internal_nodes(self) -> Mapping[str, Callable[..., Any]]:
        return self._internal_nodes

    @property
    def leaf_nodes(self) -> Mapping[str, Callable[[], Any]]:
        return self._leaf_nodes

    @property
    def all_names(self) -> FrozenSet[str]:
        """Every registered name, internal and leaf."""
        return self._all_names

    def lookup_leaf(self, name: str) -> Optional[Callable[[], Any]]:
        return self._leaf_nodes.get(name)

    def lookup_internal(self, name: str) -> Optional[Callable[..., Any]]:
        return self._internal_nodes.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._all_names

    def __len__(self) -> int:
        return len(self._all_names)

    def __repr__(self) -> str:
        return (
            f"NodeRegistry(internal={sorted(self._internal_nodes)}, "
            f"leaf={sorted(self._leaf_nodes)})"
        )

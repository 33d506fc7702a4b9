"""Custom exceptions for the nodeinjector engine."""

from typing import Iterable, List, Optional


class InjectorError(Exception):
    """Base class for every error raised by nodeinjector."""


class RegistrationError(InjectorError):
    """Raised when the nodes handed to an injector are not usable.

    Examples:
        >>> raise RegistrationError("Leaf node 'foo' must be callable")
        Traceback (most recent call last):
            ...
        nodeinjector.exceptions.RegistrationError: Leaf node 'foo' must be callable
    """


class DuplicateNameError(RegistrationError):
    """Raised when a name is registered both as an internal and as a leaf node.

    Args:
        names: Every name present in both namespaces.

    Examples:
        >>> err = DuplicateNameError({"foo", "bar"})
        >>> err.names
        ['bar', 'foo']
        >>> str(err)
        "Duplicate node names: ['bar', 'foo']"
    """

    def __init__(self, names: Iterable[str]) -> None:
        self.names = sorted(names)
        super().__init__(f"Duplicate node names: {self.names}")


class ResolutionError(InjectorError):
    """Raised when a node cannot be resolved.

    Carries the chain of node names, outermost request first, that led to
    the failure.

    Args:
        message: Description of the resolution failure.
        chain: The node names visited on the way to the failure.
    """

    def __init__(self, message: str, chain: "Optional[List[str]]" = None) -> None:
        super().__init__(message)
        self.chain = list(chain or [])

    @property
    def path(self) -> str:
        """The chain rendered as ``outer -> ... -> inner``."""
        return " -> ".join(self.chain)


class NodeNotFound(ResolutionError):
    """Raised when a requested name is neither an internal nor a leaf node.

    Examples:
        >>> err = NodeNotFound("foo")
        >>> str(err)
        'Node foo not found. Did you forget to add foo to the injector?'
        >>> err.chain
        ['foo']
    """

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Node {name} not found. Did you forget to add {name} to the injector?",
            chain=[name],
        )
        self.name = name


class CannotConstruct(ResolutionError):
    """Raised when a dependency of a node could not be built.

    Each recursion level wraps the failure coming from below and appends one
    line naming the node it was building, so the message reads as a trace
    from the innermost cause outwards.

    Examples:
        >>> inner = NodeNotFound("db")
        >>> outer = CannotConstruct.wrap(CannotConstruct.wrap(inner, "repo"), "service")
        >>> print(outer)
        Node db not found. Did you forget to add db to the injector?
        Could not create node repo.
        Could not create node service.
        >>> outer.path
        'service -> repo -> db'
    """

    def __init__(self, message: str, name: str, chain: "Optional[List[str]]" = None) -> None:
        super().__init__(message, chain=chain)
        self.name = name

    @classmethod
    def wrap(cls, cause: ResolutionError, name: str) -> "CannotConstruct":
        return cls(
            f"{cause}\nCould not create node {name}.",
            name,
            chain=[name] + cause.chain,
        )


class CyclicDependencyError(ResolutionError):
    """Raised when resolving a node requires that same node again.

    Examples:
        >>> str(CyclicDependencyError(["a", "b", "a"]))
        'Cyclic dependency detected: a -> b -> a'
    """

    def __init__(self, chain: List[str]) -> None:
        super().__init__(f"Cyclic dependency detected: {' -> '.join(chain)}", chain=chain)

"""Registration and call-time injection for nodeinjector.

``NodeCatalog`` gathers classes, factories and providers under node names
and turns them into an ``Injector``. ``inject(injector)`` wraps a function
so its required parameters are resolved by name when the caller leaves
them out.
"""

import functools
import inspect
import re
from typing import Any, Callable, Dict, Optional, TypeVar, Union, overload

from nodeinjector.exceptions import RegistrationError
from nodeinjector.injector import Injector
from nodeinjector.parameters import ParameterKind, classify

F = TypeVar("F", bound=Callable[..., Any])

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def node_name(target: Any) -> str:
    """Derive a node name from a class or function name.

    Examples:
        >>> class UserService: ...
        >>> node_name(UserService)
        'user_service'
        >>> class HTTPClient: ...
        >>> node_name(HTTPClient)
        'http_client'
        >>> def make_database(): ...
        >>> node_name(make_database)
        'database'
    """
    name = target.__name__
    if not inspect.isclass(target) and name.startswith("make_"):
        name = name[len("make_"):]
    return _CAMEL_BOUNDARY.sub("_", name).lower()


class NodeCatalog:
    """Collects internal and leaf nodes, then builds an ``Injector`` from them.

    Examples:
        >>> catalog = NodeCatalog()
        >>> catalog.value("foo", 1)
        >>> @catalog.internal
        ... class Bar:
        ...     def __init__(self, foo):
        ...         self.foo = foo
        >>> catalog.build().resolve("bar").foo
        1
    """

    def __init__(self) -> None:
        self._internal: Dict[str, Callable[..., Any]] = {}
        self._leaf: Dict[str, Callable[[], Any]] = {}

    @overload
    def internal(self, target: F) -> F: ...

    @overload
    def internal(self, *, name: Optional[str] = ...) -> Callable[[F], F]: ...

    def internal(self, target: Optional[F] = None, *, name: Optional[str] = None) -> Union[F, Callable[[F], F]]:
        """Register a class or factory function as an internal node.

        Can be used bare (``@catalog.internal``) or with a name
        (``@catalog.internal(name="db")``). Without a name, the node is
        named after the target in snake_case, with a ``make_`` prefix
        stripped from function names.

        Returns:
            The target, unmodified.

        Raises:
            RegistrationError: If the name is already an internal node.
        """
        def decorator(inner: F) -> F:
            self._add(self._internal, "internal", name or node_name(inner), inner)
            return inner

        if target is not None:
            return decorator(target)
        return decorator

    @overload
    def leaf(self, name: str, provider: Callable[[], Any]) -> None: ...

    @overload
    def leaf(self, name: F) -> F: ...

    @overload
    def leaf(self, name: Optional[str] = ...) -> Callable[[F], F]: ...

    def leaf(
        self, name: Union[str, F, None] = None, provider: Optional[Callable[[], Any]] = None
    ) -> Union[F, Callable[[F], F], None]:
        """Register a zero-argument provider as a leaf node.

        Either call it directly (``catalog.leaf("port", lambda: 8080)``) or
        use it as a decorator on the provider function, bare
        (``@catalog.leaf``) or named (``@catalog.leaf(name="port")``).

        Raises:
            RegistrationError: If the name is already a leaf node.
        """
        if callable(name):
            if provider is not None:
                raise RegistrationError("A leaf node name must be a string")
            self._add(self._leaf, "leaf", node_name(name), name)
            return name

        if provider is not None:
            if name is None:
                raise RegistrationError("A leaf node registered with a provider needs a name")
            self._add(self._leaf, "leaf", name, provider)
            return None

        def decorator(inner: F) -> F:
            self._add(self._leaf, "leaf", name or node_name(inner), inner)
            return inner

        return decorator

    def value(self, name: str, value: Any) -> None:
        """Register a constant as a leaf node."""
        self._add(self._leaf, "leaf", name, lambda: value)

    def build(self, *, detect_cycles: bool = True) -> Injector:
        """Create an injector over everything registered so far.

        Raises:
            DuplicateNameError: If a name was registered as both kinds.
        """
        return Injector(self._internal, self._leaf, detect_cycles=detect_cycles)

    @staticmethod
    def _add(nodes: Dict[str, Any], kind: str, name: str, target: Any) -> None:
        if not callable(target):
            raise RegistrationError(
                f"{kind.capitalize()} node '{name}' must be callable, got {type(target).__name__}"
            )
        if name in nodes:
            raise RegistrationError(f"Duplicate {kind} node '{name}'")
        nodes[name] = target


def inject(injector: Injector) -> Callable[[F], F]:
    """Resolve missing required parameters from *injector* at call time.

    Parameters that the caller supplies explicitly are left as-is. Every
    other required parameter is resolved as the node of the same name. A
    callable without an introspectable signature is returned unwrapped.

    Examples:
        >>> injector = Injector(leaf_nodes={"greeting": lambda: "hello"})
        >>> @inject(injector)
        ... def greet(greeting, name="world"):
        ...     return f"{greeting} {name}"
        >>> greet()
        'hello world'
        >>> greet("hi")
        'hi world'
    """
    def decorator(fn: F) -> F:
        try:
            sig = inspect.signature(fn)
        except (ValueError, TypeError):
            return fn
        descriptors = classify(fn)

        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            bound = sig.bind_partial(*args, **kwargs)
            for param in descriptors:
                if param.kind is ParameterKind.IGNORABLE or param.name in bound.arguments:
                    continue
                bound.arguments[param.name] = injector.resolve(param.name)
            return fn(*bound.args, **bound.kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator

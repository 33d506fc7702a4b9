"""Parameter classification for injectable callables."""

import inspect
import logging
from enum import Enum
from typing import Any, Callable, List, NamedTuple

logger = logging.getLogger(__name__)


class ParameterKind(Enum):
    """How the injector treats a declared parameter.

    Attributes:
        REQUIRED_POSITIONAL: Supplied positionally, in declaration order.
        REQUIRED_KEYWORD: Supplied by keyword.
        IGNORABLE: Never supplied; the callable's own default, or an empty
            ``*args``/``**kwargs``, applies.

    Examples:
        >>> ParameterKind.REQUIRED_KEYWORD
        <ParameterKind.REQUIRED_KEYWORD: 'required_keyword'>
    """

    REQUIRED_POSITIONAL = "required_positional"
    REQUIRED_KEYWORD = "required_keyword"
    IGNORABLE = "ignorable"


class ParameterDescriptor(NamedTuple):
    name: str
    kind: ParameterKind


_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def _kind_of(param: inspect.Parameter) -> ParameterKind:
    if param.default is not inspect.Parameter.empty:
        return ParameterKind.IGNORABLE
    if param.kind in _POSITIONAL:
        return ParameterKind.REQUIRED_POSITIONAL
    if param.kind is inspect.Parameter.KEYWORD_ONLY:
        return ParameterKind.REQUIRED_KEYWORD
    return ParameterKind.IGNORABLE


def classify(target: Callable[..., Any]) -> List[ParameterDescriptor]:
    """Describe every parameter of *target* in declaration order.

    Classes are introspected through their own signature, so ``self`` never
    shows up. A callable without an introspectable signature is treated as
    taking no arguments.

    Args:
        target: A class or any other callable.

    Returns:
        One descriptor per declared parameter.

    Examples:
        >>> def m(a, h, b=3, *c, d=4, e, **f):
        ...     pass
        >>> [(p.name, p.kind.name) for p in classify(m)]  # doctest: +NORMALIZE_WHITESPACE
        [('a', 'REQUIRED_POSITIONAL'), ('h', 'REQUIRED_POSITIONAL'),
         ('b', 'IGNORABLE'), ('c', 'IGNORABLE'), ('d', 'IGNORABLE'),
         ('e', 'REQUIRED_KEYWORD'), ('f', 'IGNORABLE')]
    """
    try:
        sig = inspect.signature(target)
    except (ValueError, TypeError):
        logger.debug("No signature available for %r; calling it without arguments", target)
        return []

    return [ParameterDescriptor(name, _kind_of(param)) for name, param in sig.parameters.items()]


def required_positional(descriptors: List[ParameterDescriptor]) -> List[str]:
    """Names of the required positional parameters, in declaration order."""
    return [d.name for d in descriptors if d.kind is ParameterKind.REQUIRED_POSITIONAL]


def required_keyword(descriptors: List[ParameterDescriptor]) -> List[str]:
    """Names of the required keyword-only parameters."""
    return [d.name for d in descriptors if d.kind is ParameterKind.REQUIRED_KEYWORD]

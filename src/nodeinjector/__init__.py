"""nodeinjector — builds object graphs by matching parameter names to node names."""

from nodeinjector.decorators import NodeCatalog, inject, node_name
from nodeinjector.exceptions import (
    CannotConstruct,
    CyclicDependencyError,
    DuplicateNameError,
    InjectorError,
    NodeNotFound,
    RegistrationError,
    ResolutionError,
)
from nodeinjector.injector import Injector
from nodeinjector.parameters import ParameterDescriptor, ParameterKind, classify
from nodeinjector.registry import NodeRegistry

__all__ = [
    "Injector",
    "NodeRegistry",
    "NodeCatalog",
    "ParameterDescriptor",
    "ParameterKind",
    "classify",
    "inject",
    "node_name",
    "InjectorError",
    "RegistrationError",
    "DuplicateNameError",
    "ResolutionError",
    "NodeNotFound",
    "CannotConstruct",
    "CyclicDependencyError",
]

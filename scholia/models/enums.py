"""Enumerations used across Scholia models."""

from enum import Enum


class FormKind(str, Enum):
    """Kind of a top-level form."""

    COMMENT = "comment"
    EXPRESSION = "expression"


class SectionType(str, Enum):
    """Kind of an output section."""

    COMMENT = "comment"
    CODE = "code"


class DefinitionShape(str, Enum):
    """Recognized definition shapes, each with its own docstring position."""

    NAMESPACE = "namespace"
    VALUE = "value"
    FUNCTION = "function"
    MULTIMETHOD = "multimethod"
    PROTOCOL = "protocol"
    GENERIC = "generic"
    NO_DOCSTRING = "no_docstring"

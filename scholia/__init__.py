"""
Scholia: Literate documentation for Clojure sources

Split Clojure source files into documentation and code sections, lifting
docstrings and comments so that prose and code can be shown side by side.
"""

from scholia.config import ScholiaConfig, ParseOptions
from scholia.scholia import Scholia, ScholiaBuilder
from scholia.parsers import parse
from scholia.models import (
    Document,
    Section,
    Form,
    ScholiaResult,
    FormKind,
    SectionType,
    DefinitionShape,
)
from scholia.exceptions import (
    ScholiaError,
    ScholiaConfigError,
    ScholiaParseError,
    ScholiaSyntaxError,
    ScholiaPipelineError,
    UnsupportedFormError,
    UnsupportedFileTypeError,
)

__version__ = "1.0.0"
__all__ = [
    # Main classes
    "Scholia",
    "ScholiaBuilder",
    "ScholiaConfig",
    "ParseOptions",
    "parse",
    # Models
    "Document",
    "Section",
    "Form",
    "ScholiaResult",
    # Enums
    "FormKind",
    "SectionType",
    "DefinitionShape",
    # Exceptions
    "ScholiaError",
    "ScholiaConfigError",
    "ScholiaParseError",
    "ScholiaSyntaxError",
    "ScholiaPipelineError",
    "UnsupportedFormError",
    "UnsupportedFileTypeError",
]

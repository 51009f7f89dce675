"""Configuration for Scholia."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Dict, Any, List
import os
import re

import yaml

from scholia.exceptions import ScholiaConfigError

OUTPUT_FORMATS = ("markdown", "json")


@dataclass(frozen=True)
class ParseOptions:
    """Flags that change how a single file is parsed.

    Passed explicitly into every parse call; never read from shared state.
    """

    lift_inline_comments: bool = False
    """Lift comments inside a form's body into that form's documentation."""

    exclude_lifted_comments: bool = False
    """Also strip lifted comments from the displayed code."""

    merge_adjacent_code: bool = False
    """Join code forms on consecutive lines into a single section."""


@dataclass
class ScholiaConfig:
    """Configuration for Scholia processing."""

    # Parsing
    lift_inline_comments: bool = True
    """Lift comments to the top of the enclosing form."""

    exclude_lifted_comments: bool = True
    """If comments are being lifted, also exclude them from the code display."""

    merge_adjacent_code: bool = False
    """Join code forms that sit on consecutive lines."""

    # Output
    output_format: str = "markdown"
    """Output format: markdown or json."""

    output_file: str = "uberdoc.md"
    """File name for the combined output."""

    multi_file: bool = False
    """Write one file per namespace plus a table of contents."""

    exclude: List[str] = field(default_factory=list)
    """Regular expressions; matching source paths are skipped."""

    # Project metadata shown in output headers
    project_name: Optional[str] = None
    project_version: Optional[str] = None
    project_description: Optional[str] = None

    # Pipeline behavior
    max_workers: int = 1
    """Number of threads used to parse files."""

    continue_on_error: bool = False
    """Continue pipeline execution on stage errors."""

    # Logging
    verbose: bool = False
    """Enable verbose logging output."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate configuration values."""
        if self.output_format not in OUTPUT_FORMATS:
            raise ScholiaConfigError(
                f"output_format must be one of {', '.join(OUTPUT_FORMATS)}, got {self.output_format!r}",
                "output_format",
            )

        if not self.output_file:
            raise ScholiaConfigError("output_file must not be empty", "output_file")

        if self.max_workers < 1:
            raise ScholiaConfigError(
                f"max_workers must be at least 1, got {self.max_workers}",
                "max_workers",
            )

        if isinstance(self.exclude, str):
            raise ScholiaConfigError(
                "exclude must be a list of patterns, not a string", "exclude"
            )

        for pattern in self.exclude:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ScholiaConfigError(
                    f"Invalid exclude pattern {pattern!r}: {e}", "exclude"
                )

    @property
    def parse_options(self) -> ParseOptions:
        """The immutable parse flags carried by this configuration."""
        return ParseOptions(
            lift_inline_comments=self.lift_inline_comments,
            exclude_lifted_comments=self.exclude_lifted_comments,
            merge_adjacent_code=self.merge_adjacent_code,
        )

    @property
    def project(self) -> Dict[str, Optional[str]]:
        """Project metadata for output headers."""
        return {
            "name": self.project_name,
            "version": self.project_version,
            "description": self.project_description,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScholiaConfig":
        """Create configuration from dictionary."""
        # Handle nested structure from YAML
        flat_data: Dict[str, Any] = {}

        if "parsing" in data:
            parsing = data["parsing"] or {}
            flat_data["lift_inline_comments"] = parsing.get("lift_inline_comments", True)
            flat_data["exclude_lifted_comments"] = parsing.get(
                "exclude_lifted_comments", True
            )
            flat_data["merge_adjacent_code"] = parsing.get("merge_adjacent_code", False)

        if "output" in data:
            output = data["output"] or {}
            flat_data["output_format"] = output.get("format", "markdown")
            flat_data["output_file"] = output.get("file", "uberdoc.md")
            flat_data["multi_file"] = output.get("multi", False)

        if "project" in data:
            project = data["project"] or {}
            flat_data["project_name"] = project.get("name")
            flat_data["project_version"] = project.get("version")
            flat_data["project_description"] = project.get("description")

        if "behavior" in data:
            behavior = data["behavior"] or {}
            flat_data["max_workers"] = behavior.get("max_workers", 1)
            flat_data["continue_on_error"] = behavior.get("continue_on_error", False)
            flat_data["verbose"] = behavior.get("verbose", False)
            flat_data["exclude"] = list(behavior.get("exclude") or [])

        # Also accept flat keys
        for key in [
            "lift_inline_comments",
            "exclude_lifted_comments",
            "merge_adjacent_code",
            "output_format",
            "output_file",
            "multi_file",
            "exclude",
            "project_name",
            "project_version",
            "project_description",
            "max_workers",
            "continue_on_error",
            "verbose",
        ]:
            if key in data and key not in flat_data:
                flat_data[key] = data[key]

        return cls(**flat_data)

    @classmethod
    def from_yaml(cls, path: str) -> "ScholiaConfig":
        """Load configuration from YAML file."""
        file_path = Path(path)
        if not file_path.exists():
            raise ScholiaConfigError(f"Config file not found: {path}")

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ScholiaConfigError(f"Invalid YAML in config file: {e}")

        if data is None:
            data = {}

        if not isinstance(data, dict):
            raise ScholiaConfigError(
                f"Config file must contain a mapping, got {type(data).__name__}"
            )

        # Handle environment variable substitution
        data = cls._substitute_env_vars(data)

        return cls.from_dict(data)

    @classmethod
    def _substitute_env_vars(cls, data: Any) -> Any:
        """Recursively substitute environment variables in config."""
        if isinstance(data, dict):
            return {k: cls._substitute_env_vars(v) for k, v in data.items()}
        elif isinstance(data, list):
            return [cls._substitute_env_vars(item) for item in data]
        elif isinstance(data, str) and data.startswith("${") and data.endswith("}"):
            env_var = data[2:-1]
            return os.environ.get(env_var, "")
        return data

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "lift_inline_comments": self.lift_inline_comments,
            "exclude_lifted_comments": self.exclude_lifted_comments,
            "merge_adjacent_code": self.merge_adjacent_code,
            "output_format": self.output_format,
            "output_file": self.output_file,
            "multi_file": self.multi_file,
            "exclude": list(self.exclude),
            "project_name": self.project_name,
            "project_version": self.project_version,
            "project_description": self.project_description,
            "max_workers": self.max_workers,
            "continue_on_error": self.continue_on_error,
            "verbose": self.verbose,
        }

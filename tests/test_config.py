from __future__ import annotations

from pathlib import Path

import pytest

from scholia.config import ParseOptions, ScholiaConfig
from scholia.exceptions import ScholiaConfigError


def test_defaults_lift_and_exclude() -> None:
    config = ScholiaConfig()
    assert config.parse_options == ParseOptions(
        lift_inline_comments=True,
        exclude_lifted_comments=True,
        merge_adjacent_code=False,
    )
    assert config.output_format == "markdown"
    assert config.output_file == "uberdoc.md"


def test_parse_options_are_immutable() -> None:
    options = ParseOptions()
    with pytest.raises(AttributeError):
        options.lift_inline_comments = True  # type: ignore[misc]


@pytest.mark.parametrize(
    "kwargs, key",
    [
        ({"output_format": "html"}, "output_format"),
        ({"output_file": ""}, "output_file"),
        ({"max_workers": 0}, "max_workers"),
        ({"exclude": "test"}, "exclude"),
        ({"exclude": ["("]}, "exclude"),
    ],
)
def test_invalid_values_are_rejected(kwargs: dict, key: str) -> None:
    with pytest.raises(ScholiaConfigError) as excinfo:
        ScholiaConfig(**kwargs)
    assert excinfo.value.config_key == key


def test_from_dict_nested_sections() -> None:
    config = ScholiaConfig.from_dict(
        {
            "parsing": {"lift_inline_comments": False, "merge_adjacent_code": True},
            "output": {"format": "json", "file": "api.json", "multi": True},
            "project": {"name": "demo", "version": "0.1.0"},
            "behavior": {"max_workers": 4, "exclude": ["_test\\.clj$"]},
        }
    )
    assert config.lift_inline_comments is False
    assert config.exclude_lifted_comments is True
    assert config.merge_adjacent_code is True
    assert config.output_format == "json"
    assert config.output_file == "api.json"
    assert config.multi_file is True
    assert config.project == {"name": "demo", "version": "0.1.0", "description": None}
    assert config.max_workers == 4
    assert config.exclude == ["_test\\.clj$"]


def test_from_dict_flat_keys() -> None:
    config = ScholiaConfig.from_dict({"project_name": "flat", "verbose": True})
    assert config.project_name == "flat"
    assert config.verbose is True


def test_to_dict_round_trip() -> None:
    config = ScholiaConfig(project_name="demo", exclude=["x"], max_workers=2)
    assert ScholiaConfig.from_dict(config.to_dict()) == config


def test_from_yaml_substitutes_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SCHOLIA_PROJECT", "from-env")
    path = tmp_path / "scholia.yaml"
    path.write_text(
        "project:\n"
        "  name: ${SCHOLIA_PROJECT}\n"
        "output:\n"
        "  multi: true\n",
        encoding="utf-8",
    )

    config = ScholiaConfig.from_yaml(str(path))
    assert config.project_name == "from-env"
    assert config.multi_file is True


def test_from_yaml_empty_file_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert ScholiaConfig.from_yaml(str(path)) == ScholiaConfig()


def test_from_yaml_errors(tmp_path: Path) -> None:
    with pytest.raises(ScholiaConfigError):
        ScholiaConfig.from_yaml(str(tmp_path / "missing.yaml"))

    listing = tmp_path / "list.yaml"
    listing.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ScholiaConfigError):
        ScholiaConfig.from_yaml(str(listing))

    broken = tmp_path / "broken.yaml"
    broken.write_text("output: [unclosed\n", encoding="utf-8")
    with pytest.raises(ScholiaConfigError):
        ScholiaConfig.from_yaml(str(broken))

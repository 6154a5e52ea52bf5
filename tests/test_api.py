"""Tests for the Python API facade."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

import changelog_yaml
from changelog_yaml import ChangelogYaml
from changelog_yaml.config import Config
from changelog_yaml.errors import InputError
from changelog_yaml.formatters import formatter_for

BASIC = """\
repo: org/core
releases:
  - name: v1.0.0
    date: 2024-01-01
    repos:
      core:
        added:
          - "Initial support #5 by @alice"
repos:
  core:
    repo: org/core
"""


def test_python_api_renders_markdown_by_default() -> None:
    changelog = ChangelogYaml.from_text(BASIC)

    output = changelog.render()

    assert output.startswith("# Changelog\n\n## :bookmark: ")
    assert "[#5](https://github.com/org/core/pull/5)" in output
    assert changelog.config == Config()
    assert changelog.document.repo == "org/core"


def test_python_api_render_format_argument() -> None:
    output = ChangelogYaml.from_text(BASIC).render("adoc")

    assert output.startswith("= Changelog\n\n== &#x1F516; ")


def test_python_api_uses_config_object() -> None:
    config = Config(output_format="asciidoc", host="https://git.example.com")

    output = ChangelogYaml.from_text(BASIC, config=config).render()

    assert "https://git.example.com/org/core/pull/5[#5]" in output


def test_python_api_loads_config_path(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("host: https://a.example\n", encoding="utf-8")
    source = tmp_path / "changelog.yaml"
    source.write_text(BASIC, encoding="utf-8")

    changelog = ChangelogYaml.from_file(source, config=str(config_path))

    assert changelog.config.host == "https://a.example"
    assert "[@alice](https://a.example/alice)" in changelog.render()


def test_python_api_write_matches_render() -> None:
    changelog = ChangelogYaml.from_text(BASIC)
    sink = io.StringIO()

    changelog.write(sink)

    assert sink.getvalue() == changelog.render()


def test_python_api_missing_file(tmp_path: Path) -> None:
    with pytest.raises(InputError):
        ChangelogYaml.from_file(tmp_path / "missing.yaml")


def test_package_exports() -> None:
    document = changelog_yaml.load_document(BASIC)

    assert changelog_yaml.render_document(document, formatter_for("md")).startswith("# Changelog")

"""Tests for the usenav CLI commands."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from usenav import __version__
from usenav.cli.main import cli
from usenav.config import loader

runner = CliRunner()

ORG_MODEL = """\
class Org {
  /** @type {typeof import('App/Services/Repository')} */
  static repository
}
module.exports = Org
"""

REPOSITORY = """\
class Repository {
  static search(query) {
    return query
  }

  list() {
    return []
  }
}
module.exports = Repository
"""

CONTROLLER = """\
const Repo = use('App/Services/Repository')
const Org = use('App/Models/Org')

Repo.search('acme')
Org.repository.
"""


@pytest.fixture(autouse=True)
def isolated_global_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """Point the global config at a temp path; drop CLI log handlers afterwards."""
    monkeypatch.setattr(loader, "GLOBAL_CONFIG_PATH", tmp_path / "global" / "config.yaml")
    monkeypatch.delenv("USENAV__LOGGING__LEVEL", raising=False)
    yield
    logging.getLogger().handlers.clear()


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Project root with one model, one service and one controller."""
    root = tmp_path / "project"
    for relative, content in (
        ("app/Models/Org.js", ORG_MODEL),
        ("app/Services/Repository.js", REPOSITORY),
        ("app/Controllers/OrgController.js", CONTROLLER),
    ):
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root.resolve()


@pytest.fixture
def controller(project: Path) -> Path:
    return project / "app/Controllers/OrgController.js"


class TestMain:
    """Group-level options."""

    def test_version(self) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_invalid_repo_config_fails(self, project: Path, controller: Path) -> None:
        config_dir = project / ".usenav"
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("resolution:\n  max_file_size_kb: 0\n")

        result = runner.invoke(
            cli, ["--root", str(project), "definition", str(controller), "0", "20"]
        )

        assert result.exit_code != 0
        assert "CONFIG_INVALID_VALUE" in result.output

    def test_unparseable_repo_config_fails(self, project: Path) -> None:
        config_dir = project / ".usenav"
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("logging: [unclosed\n")

        result = runner.invoke(cli, ["--root", str(project), "model", "Org"])

        assert result.exit_code != 0
        assert "CONFIG_PARSE_ERROR" in result.output

    def test_missing_explicit_config_fails(self, project: Path, tmp_path: Path) -> None:
        missing = tmp_path / "nope.yaml"

        result = runner.invoke(
            cli, ["--root", str(project), "--config", str(missing), "model", "Org"]
        )

        assert result.exit_code != 0
        assert "CONFIG_FILE_NOT_FOUND" in result.output

    def test_missing_root_finds_nothing(self, tmp_path: Path, controller: Path) -> None:
        result = runner.invoke(
            cli,
            ["--root", str(tmp_path / "absent"), "definition", str(controller), "0", "20"],
        )

        assert result.exit_code == 0
        assert result.stdout == ""


class TestDefinitionCommand:
    """usenav definition command tests."""

    def test_specifier_definition(self, project: Path, controller: Path) -> None:
        result = runner.invoke(
            cli, ["--root", str(project), "definition", str(controller), "0", "20"]
        )

        assert result.exit_code == 0
        target = project / "app/Services/Repository.js"
        assert result.stdout.strip() == f"{target}:0:0"

    def test_member_definition_json(self, project: Path, controller: Path) -> None:
        result = runner.invoke(
            cli, ["--root", str(project), "definition", str(controller), "3", "7", "--json"]
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "path": str(project / "app/Services/Repository.js"),
            "line": 1,
            "character": 0,
        }

    def test_miss_prints_null_in_json(self, project: Path, controller: Path) -> None:
        result = runner.invoke(
            cli, ["--root", str(project), "definition", str(controller), "2", "0", "--json"]
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout) is None

    def test_line_past_end_is_a_miss(self, project: Path, controller: Path) -> None:
        result = runner.invoke(
            cli, ["--root", str(project), "definition", str(controller), "99", "0"]
        )

        assert result.exit_code == 0
        assert result.stdout == ""

    def test_missing_document_is_a_usage_error(self, project: Path) -> None:
        result = runner.invoke(
            cli, ["--root", str(project), "definition", str(project / "nope.js"), "0", "0"]
        )
        assert result.exit_code != 0


class TestCompleteCommand:
    """usenav complete command tests."""

    def test_typed_member_completions(self, project: Path, controller: Path) -> None:
        result = runner.invoke(
            cli, ["--root", str(project), "complete", str(controller), "4", "15"]
        )

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["search\tstatic_method", "list\tmethod"]

    def test_json_output(self, project: Path, controller: Path) -> None:
        result = runner.invoke(
            cli, ["--root", str(project), "complete", str(controller), "3", "5", "--json"]
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout) == [
            {"name": "search", "kind": "static_method"},
            {"name": "list", "kind": "method"},
        ]

    def test_no_chain_before_cursor(self, project: Path, controller: Path) -> None:
        result = runner.invoke(
            cli, ["--root", str(project), "complete", str(controller), "0", "3", "--json"]
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout) == []


class TestModelCommand:
    """usenav model command tests."""

    def test_found(self, project: Path) -> None:
        result = runner.invoke(cli, ["--root", str(project), "model", "Org"])

        assert result.exit_code == 0
        assert result.stdout.strip() == str(project / "app/Models/Org.js")

    def test_missing_json(self, project: Path) -> None:
        result = runner.invoke(cli, ["--root", str(project), "model", "Ghost", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"name": "Ghost", "path": None}

    def test_overlong_name_is_a_miss(self, project: Path) -> None:
        result = runner.invoke(cli, ["--root", str(project), "model", "A" * 300, "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"name": "A" * 300, "path": None}

    def test_verbose_keeps_stdout_clean(self, project: Path) -> None:
        result = runner.invoke(cli, ["-v", "--root", str(project), "model", "Org", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["path"] == str(project / "app/Models/Org.js")

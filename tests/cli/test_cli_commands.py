"""Tests for the upconf CLI."""

import json
import os
import tempfile
from pathlib import Path
import pytest
from click.testing import CliRunner
from upconf import __version__
from upconf.cli.main import cli


@pytest.fixture
def project():
    """Project directory with a nested source folder."""
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir) / "project"
        (root / "src").mkdir(parents=True)
        yield root


class TestValueCommands:
    """Test show, get, set and clear."""

    def test_set_then_get(self, project):
        runner = CliRunner()
        base = ['--file', 'app.json', '--dir', str(project)]

        result = runner.invoke(cli, base + ['set', 'server:port', '8080'])
        assert result.exit_code == 0
        assert json.loads((project / "app.json").read_text()) == {"server": {"port": 8080}}

        result = runner.invoke(cli, base + ['get', 'server:port'])
        assert result.exit_code == 0
        assert result.output.strip() == "8080"

    def test_set_plain_string(self, project):
        runner = CliRunner()
        result = runner.invoke(cli, ['--file', 'app.json', '--dir', str(project), 'set', 'name', 'demo app'])

        assert result.exit_code == 0
        assert json.loads((project / "app.json").read_text()) == {"name": "demo app"}

    def test_show_creates_missing_file(self, project):
        runner = CliRunner()
        result = runner.invoke(cli, ['--file', 'app.json', '--dir', str(project), '--no-search', 'show'])

        assert result.exit_code == 0
        assert json.loads(result.output) == {}
        assert (project / "app.json").exists()

    def test_set_without_search_writes_into_dir(self, project):
        """--dir decides where the file goes, not the working directory."""
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ['--file', 'app.json', '--dir', str(project), '--no-search', 'set', 'a', '1'])

            assert result.exit_code == 0
            assert not Path("app.json").exists()
        assert json.loads((project / "app.json").read_text()) == {"a": 1}

    def test_get_missing_key(self, project):
        (project / "app.json").write_text('{"a": 1}')
        runner = CliRunner()
        result = runner.invoke(cli, ['--file', 'app.json', '--dir', str(project), 'get', 'b'])

        assert result.exit_code == 1

    def test_clear(self, project):
        (project / "app.json").write_text('{"a": 1, "b": 2}')
        runner = CliRunner()
        result = runner.invoke(cli, ['--file', 'app.json', '--dir', str(project), 'clear', 'a'])

        assert result.exit_code == 0
        assert json.loads((project / "app.json").read_text()) == {"b": 2}

    def test_show_invalid_file(self, project):
        (project / "app.json").write_text("{oops")
        runner = CliRunner()
        result = runner.invoke(cli, ['--file', 'app.json', '--dir', str(project), 'show'])

        assert result.exit_code == 1
        assert "Error parsing your configuration file." in result.output

    def test_yaml_format(self, project):
        runner = CliRunner()
        base = ['--file', 'app.yaml', '--dir', str(project), '--format', 'yaml']

        assert runner.invoke(cli, base + ['set', 'debug', 'true']).exit_code == 0
        assert "debug: true" in (project / "app.yaml").read_text()


class TestWhereCommand:
    """Test path resolution from the command line."""

    def test_where_finds_parent_file(self, project):
        (project / "app.json").write_text("{}")
        runner = CliRunner()
        result = runner.invoke(cli, ['--file', 'app.json', '--dir', str(project / "src"), 'where'])

        assert result.exit_code == 0
        assert result.output.strip() == os.path.join(str(project), "app.json")

    def test_where_without_search(self, project):
        runner = CliRunner()
        result = runner.invoke(cli, ['--file', 'app.json', '--dir', str(project), '--no-search', 'where'])

        assert result.exit_code == 0
        assert result.output.strip() == os.path.join(str(project), "app.json")

    def test_where_without_search_keeps_absolute_file(self, project):
        target = str(project / "src" / "app.json")
        runner = CliRunner()
        result = runner.invoke(cli, ['--file', target, '--dir', str(project), '--no-search', 'where'])

        assert result.exit_code == 0
        assert result.output.strip() == target

    def test_missing_file_option(self):
        runner = CliRunner()
        result = runner.invoke(cli, ['where'])

        assert result.exit_code == 1
        assert "Missing required option `file`" in result.output


class TestVersion:

    def test_version_command(self):
        result = CliRunner().invoke(cli, ['version'])
        assert result.exit_code == 0
        assert __version__ in result.output

"""Tests for the command-line interface."""

import subprocess
from pathlib import Path

import pytest
from click.testing import CliRunner

from magic_opener import cli as cli_module
from magic_opener.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def opened(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    destinations: list[str] = []

    def fake_open(destination, settings) -> int:
        destinations.append(destination)
        return 0

    monkeypatch.setattr(cli_module, "open_destination", fake_open)
    return destinations


@pytest.mark.unit
class TestCli:
    """Tests for the open command."""

    def test_print_joins_paths(self, runner: CliRunner, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(cli, ["-p", "foo", "bar"])
        assert result.exit_code == 0
        assert result.output == "foo bar\n"

    def test_print_dot(self, runner: CliRunner, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(cli, ["--print", "."])
        assert result.output == f"{Path.cwd()}\n"

    def test_print_repository(self, runner: CliRunner, git_repo_with_origin: Path, monkeypatch) -> None:
        monkeypatch.chdir(git_repo_with_origin)
        result = runner.invoke(cli, ["-p"])
        assert result.exit_code == 0
        assert result.output == "https://github.com/acme/widgets\n"

    def test_print_pull_request(self, runner: CliRunner, git_repo_with_origin: Path, monkeypatch) -> None:
        monkeypatch.chdir(git_repo_with_origin)
        result = runner.invoke(cli, ["-p", "42"])
        assert result.output == "https://github.com/acme/widgets/pull/42\n"

    def test_repository_without_remote_opens_directory(
        self, runner: CliRunner, git_repo: Path, monkeypatch
    ) -> None:
        monkeypatch.chdir(git_repo)
        result = runner.invoke(cli, ["-p"])
        assert result.exit_code == 0
        assert result.output == f"{Path.cwd()}\n"

    def test_invalid_remote_reports_error(self, runner: CliRunner, git_repo: Path, monkeypatch) -> None:
        subprocess.run(
            ["git", "remote", "add", "origin", "/srv/git/widgets.git"],
            cwd=git_repo,
            capture_output=True,
            check=True,
        )
        monkeypatch.chdir(git_repo)
        result = runner.invoke(cli, ["-p"])
        assert result.exit_code == 1
        assert "open error: Invalid Git repository spec: /srv/git/widgets.git" in result.output

    def test_opens_destination(self, runner: CliRunner, tmp_path: Path, monkeypatch, opened) -> None:
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(cli, ["https://example.com"])
        assert result.exit_code == 0
        assert opened == ["https://example.com"]

    def test_option_like_arguments_pass_through(self, runner: CliRunner, tmp_path: Path, monkeypatch) -> None:
        calls = []

        def fake_passthrough(arguments, settings) -> str:
            calls.append(list(arguments))
            return "usage: open ...\n"

        monkeypatch.setattr(cli_module, "passthrough", fake_passthrough)
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(cli, ["-a", "Safari"])
        assert result.exit_code == 0
        assert calls == [["-a", "Safari"]]
        assert result.output == "usage: open ...\n"

    def test_ssh_session_forwards(self, runner: CliRunner, tmp_path: Path, monkeypatch) -> None:
        forwarded = []
        monkeypatch.setattr(
            cli_module, "forward_destination", lambda destination, settings: forwarded.append(destination)
        )
        monkeypatch.setenv("SSH_TTY", "/dev/pts/3")
        monkeypatch.setenv("SSH_CLIENT_HOME", "/Users/me")
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(cli, ["/bits/project"])
        assert result.exit_code == 0
        assert forwarded == ["/Users/me/Mounts/bits/project"]

    def test_ssh_session_without_client_home(self, runner: CliRunner, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setenv("SSH_TTY", "/dev/pts/3")
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(cli, ["-p", "notes.txt"])
        assert result.exit_code == 1
        assert "SSH_CLIENT_HOME" in result.output

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.2.2" in result.output

    def test_help_is_answered_by_click(self, runner: CliRunner, monkeypatch) -> None:
        monkeypatch.setattr(
            cli_module, "passthrough", lambda arguments, settings: pytest.fail("opener was run")
        )
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Usage:" in result.output
        assert "--print" in result.output

"""Shared pytest fixtures for repokit tests."""

from pathlib import Path
from typing import Sequence

import pytest

from repokit.context import ExecutionContext
from repokit.env_var import Settings
from repokit.git.exec import CommandResult

REMOTE_URL = "git@github.com:acme/widgets.git"


class FakeRunner:
    """
    Record every command and answer with scripted results.

    A response matches when its prefix equals the start of the command. The
    first matching response with uses left wins; unmatched commands succeed
    with empty output.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, ...]] = []
        self.interactive_calls: list[tuple[str, ...]] = []
        self.missing_programs: set[str] = set()
        self._responses: list[list] = []

    def respond(
        self,
        *prefix: str,
        returncode: int = 0,
        stdout: str = "",
        stderr: str = "",
        times: int | None = None,
    ) -> None:
        self._responses.append([prefix, returncode, stdout, stderr, times])

    def run(
        self,
        cmd: Sequence[str],
        *,
        cwd: Path | None = None,
        interactive: bool = False,
    ) -> CommandResult:
        args = tuple(cmd)
        self.calls.append(args)
        if interactive:
            self.interactive_calls.append(args)
        for response in self._responses:
            prefix, returncode, stdout, stderr, times = response
            if args[: len(prefix)] != prefix or times == 0:
                continue
            if times is not None:
                response[4] = times - 1
            return CommandResult(args, returncode, stdout, stderr)
        return CommandResult(args, 0)

    def which(self, program: str) -> bool:
        return program not in self.missing_programs

    def calls_starting_with(self, *prefix: str) -> list[tuple[str, ...]]:
        return [call for call in self.calls if call[: len(prefix)] == prefix]


class FakePrompter:
    def __init__(self) -> None:
        self.answers: list[str] = []
        self.confirmations: list[bool] = []
        self.questions: list[str] = []

    def ask(self, question: str, default: str | None = None) -> str:
        self.questions.append(question)
        if not self.answers:
            return default or ""
        return self.answers.pop(0)

    def confirm(self, question: str) -> bool:
        self.questions.append(question)
        return self.confirmations.pop(0) if self.confirmations else False


def api_output(status: int, reason: str, body: str = "") -> str:
    """Output of `gh api --include` for a response."""
    return f"HTTP/2.0 {status} {reason}\nContent-Type: application/json; charset=utf-8\n\n{body}"


@pytest.fixture
def runner() -> FakeRunner:
    fake = FakeRunner()
    fake.respond("git", "config", "--get", "remote.origin.url", stdout=REMOTE_URL + "\n")
    return fake


@pytest.fixture
def prompter() -> FakePrompter:
    return FakePrompter()


@pytest.fixture
def work_tree(tmp_path) -> Path:
    repo = tmp_path / "widgets"
    (repo / ".git").mkdir(parents=True)
    return repo


@pytest.fixture
def ctx(work_tree, runner, prompter) -> ExecutionContext:
    return ExecutionContext(
        cwd=work_tree, runner=runner, prompter=prompter, settings=Settings()
    )

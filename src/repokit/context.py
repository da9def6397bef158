"""Explicit execution context handed to every operation."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

import typer

from repokit.env_var import Settings
from repokit.errors import ErrorKind, OperationError
from repokit.git.exec import CommandResult, CommandRunner, SubprocessRunner

CONFIRMATION_WORD = "yes"


class Prompter(Protocol):
    def ask(self, question: str, default: str | None = None) -> str: ...

    def confirm(self, question: str) -> bool: ...


class TyperPrompter:
    def ask(self, question: str, default: str | None = None) -> str:
        if default is None:
            return typer.prompt(question, default="", show_default=False)
        return typer.prompt(question, default=default)

    def confirm(self, question: str) -> bool:
        return typer.confirm(question, default=False)


@dataclass(frozen=True)
class RepoIdentity:
    owner: str
    name: str

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.name}"

    def __str__(self) -> str:
        return self.slug


@dataclass
class ExecutionContext:
    cwd: Path
    runner: CommandRunner = field(default_factory=SubprocessRunner)
    prompter: Prompter = field(default_factory=TyperPrompter)
    settings: Settings = field(default_factory=Settings)

    @classmethod
    def from_environment(cls) -> "ExecutionContext":
        return cls(cwd=Path.cwd(), settings=Settings.from_env())

    def run(self, cmd: list[str], *, interactive: bool = False) -> CommandResult:
        return self.runner.run(cmd, cwd=self.cwd, interactive=interactive)

    def step(self, cmd: list[str], failure: str, *, interactive: bool = False) -> CommandResult:
        """Run one step of a sequence, stopping the sequence if it fails."""
        result = self.run(cmd, interactive=interactive)
        if not result.ok:
            raise OperationError(
                ErrorKind.STEP_FAILED, f"{failure}: {result.error_text()}"
            )
        return result


@dataclass
class RepoContext:
    """An execution context whose prerequisites have all been checked."""

    context: ExecutionContext
    identity: RepoIdentity

    @property
    def runner(self) -> CommandRunner:
        return self.context.runner

    @property
    def prompter(self) -> Prompter:
        return self.context.prompter


def require_tool(ctx: ExecutionContext, program: str) -> None:
    if not ctx.runner.which(program):
        raise OperationError(
            ErrorKind.ENVIRONMENT,
            f"'{program}' is not installed or not on PATH.",
        )


def is_working_tree(path: Path) -> bool:
    return (path / ".git").exists()


def require_working_tree(ctx: ExecutionContext) -> None:
    if not is_working_tree(ctx.cwd):
        raise OperationError(
            ErrorKind.ENVIRONMENT,
            f"{ctx.cwd} is not a git repository (no .git directory found).",
        )


def confirm_destructive(prompter: Prompter, question: str) -> None:
    """Require the user to type the confirmation word exactly, else cancel."""
    answer = prompter.ask(f"{question} Type '{CONFIRMATION_WORD}' to confirm")
    if answer.strip() != CONFIRMATION_WORD:
        raise OperationError(ErrorKind.CANCELLED, "Operation cancelled.")

import shlex
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence

from repokit.errors import ErrorKind, OperationError
from repokit.logger import logger


@dataclass(frozen=True)
class CommandResult:
    args: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def error_text(self) -> str:
        """Best available description of why the command failed."""
        return self.stderr.strip() or self.stdout.strip() or f"exit status {self.returncode}"


class CommandRunner(Protocol):
    def run(
        self,
        cmd: Sequence[str],
        *,
        cwd: Path | None = None,
        interactive: bool = False,
    ) -> CommandResult: ...

    def which(self, program: str) -> bool: ...


class SubprocessRunner:
    """
    Run external commands, never raising on a non-zero exit.

    A program missing from PATH is reported as an environment error.

    Centralizes subprocess policy so operations only ever see a CommandResult.
    Interactive commands inherit the terminal so the wrapped tool can prompt.
    """

    def run(
        self,
        cmd: Sequence[str],
        *,
        cwd: Path | None = None,
        interactive: bool = False,
    ) -> CommandResult:
        args = tuple(cmd)
        logger.debug("$ " + shlex.join(args))
        try:
            completed = subprocess.run(
                list(args),
                cwd=str(cwd) if cwd else None,
                check=False,
                capture_output=not interactive,
                text=True,
            )
        except FileNotFoundError as err:
            raise OperationError(
                ErrorKind.ENVIRONMENT,
                f"'{args[0]}' is not installed or not on PATH.",
            ) from err
        return CommandResult(
            args=args,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )

    def which(self, program: str) -> bool:
        return shutil.which(program) is not None

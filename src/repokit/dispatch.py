from typing import Callable, TypeVar

import typer

from repokit.context import ExecutionContext
from repokit.errors import ErrorKind, OperationError
from repokit.logger import logger

T = TypeVar("T")


def dispatch(operation: Callable[[ExecutionContext], T]) -> T:
    """Run an operation in a context built from the environment.

    Operation errors end the command with the exit code of their kind.
    """
    ctx = ExecutionContext.from_environment()
    try:
        return operation(ctx)
    except OperationError as err:
        if err.kind is ErrorKind.CANCELLED:
            logger.warning(err.message)
        else:
            logger.error(err.message)
        raise typer.Exit(err.kind.exit_code) from err

from typing import Annotated, Optional

import typer

from repokit.dispatch import dispatch

from .branches import delete_branch, switch_or_create_branch
from .workflow import commit_and_push, pull_commit_push, pull_latest

git_typer = typer.Typer(help="Git workflow commands")


@git_typer.command(
    name="commit-and-push",
    help="Stage all changes, commit, and push. Sets the upstream on first push.",
)
def commit_and_push_command(
    message: Annotated[
        Optional[str], typer.Argument(help="Commit message")
    ] = None,
):
    dispatch(lambda ctx: commit_and_push(ctx, message))


@git_typer.command(name="pull-latest", help="Pull the latest changes")
def pull_latest_command():
    dispatch(pull_latest)


@git_typer.command(
    name="pull-commit-push", help="Pull, then stage all changes, commit, and push"
)
def pull_commit_push_command(
    message: Annotated[
        Optional[str], typer.Argument(help="Commit message")
    ] = None,
):
    dispatch(lambda ctx: pull_commit_push(ctx, message))


@git_typer.command(
    name="delete-branch",
    help="Delete a branch locally and on the remote. "
    + "The checked-out branch and branches with unmerged work are never deleted.",
)
def delete_branch_command(
    branch: Annotated[
        Optional[str], typer.Argument(help="Branch to delete")
    ] = None,
    local_only: Annotated[
        bool, typer.Option("--local-only", "-l", help="Keep the remote branch")
    ] = False,
):
    dispatch(lambda ctx: delete_branch(ctx, branch, local_only))


@git_typer.command(
    name="switch-or-create-branch",
    help="Switch to a branch, creating it from the current commit if it does not exist",
)
def switch_or_create_branch_command(
    branch: Annotated[
        Optional[str], typer.Argument(help="Branch to switch to")
    ] = None,
):
    dispatch(lambda ctx: switch_or_create_branch(ctx, branch))

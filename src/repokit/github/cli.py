from typing import Annotated, Optional

import typer

from repokit.dispatch import dispatch
from repokit.errors import ErrorKind

from .auth import reauthenticate
from .collaborators import CollaboratorOutcome, add_collaborators, remove_collaborators
from .repos import (
    change_visibility,
    create_repository,
    delete_repository,
    format_repository_table,
    list_repositories,
    set_default_branch,
)

github_typer = typer.Typer(help="GitHub repository commands (via the gh CLI)")


def _exit_on_failures(outcomes: list[CollaboratorOutcome]) -> None:
    failures = [outcome for outcome in outcomes if not outcome.ok]
    if not failures:
        return
    first_kind = failures[0].kind or ErrorKind.STEP_FAILED
    raise typer.Exit(first_kind.exit_code)


@github_typer.command(
    name="re-authenticate", help="Log out of GitHub and optionally log back in"
)
def reauthenticate_command():
    dispatch(reauthenticate)


@github_typer.command(
    name="add-collaborators",
    help="Add comma-separated users as collaborators on the current repository",
)
def add_collaborators_command(
    users: Annotated[
        Optional[str], typer.Argument(help="Comma-separated GitHub usernames")
    ] = None,
    permission: Annotated[
        str, typer.Option(help="Permission to grant (pull, triage, push, maintain, admin)")
    ] = "push",
):
    _exit_on_failures(dispatch(lambda ctx: add_collaborators(ctx, users, permission)))


@github_typer.command(
    name="remove-collaborators",
    help="Remove comma-separated users from the current repository",
)
def remove_collaborators_command(
    users: Annotated[
        Optional[str], typer.Argument(help="Comma-separated GitHub usernames")
    ] = None,
):
    _exit_on_failures(dispatch(lambda ctx: remove_collaborators(ctx, users)))


@github_typer.command(
    name="delete-repository",
    help="Delete a GitHub repository. The .git directory in the current directory "
    + "is removed too when it is a checkout of that repository, and kept when it "
    + "belongs to a different repository.",
)
def delete_repository_command(
    name: Annotated[
        Optional[str], typer.Argument(help="Repository name or owner/name")
    ] = None,
):
    dispatch(lambda ctx: delete_repository(ctx, name))


@github_typer.command(
    name="create-repository",
    help="Create a GitHub repository from the current directory and push it",
)
def create_repository_command(
    name: Annotated[
        Optional[str], typer.Argument(help="Name of the repository to create")
    ] = None,
):
    dispatch(lambda ctx: create_repository(ctx, name))


@github_typer.command(name="list-repositories", help="List repositories and their visibility")
def list_repositories_command(
    owner: Annotated[
        Optional[str], typer.Argument(help="User or organization (defaults to you)")
    ] = None,
    limit: Annotated[
        Optional[int], typer.Option(min=1, help="Maximum number of repositories")
    ] = None,
):
    repos = dispatch(lambda ctx: list_repositories(ctx, owner, limit))
    if not repos:
        typer.echo("No repositories found.")
        return
    for line in format_repository_table(repos):
        typer.echo(line)


@github_typer.command(
    name="change-visibility",
    help="Make the current repository public or private",
)
def change_visibility_command(
    visibility: Annotated[
        Optional[str], typer.Argument(help="public or private")
    ] = None,
):
    dispatch(lambda ctx: change_visibility(ctx, visibility))


@github_typer.command(
    name="set-default-branch",
    help="Set the default branch of the current repository",
)
def set_default_branch_command(
    branch: Annotated[
        Optional[str], typer.Argument(help="Branch to make the default")
    ] = None,
):
    dispatch(lambda ctx: set_default_branch(ctx, branch))

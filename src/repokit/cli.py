import logging
from typing import Annotated

import typer

from repokit.git.cli import git_typer
from repokit.github.cli import github_typer
from repokit.logger import setup_logging

# Create Typer app instances
app = typer.Typer(help="Everyday git and GitHub repository chores.")
app.add_typer(git_typer, name="git")
app.add_typer(github_typer, name="gh")


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show the commands being run")
    ] = False,
):
    if verbose:
        setup_logging(logging.DEBUG)


if __name__ == "__main__":
    app()

from repokit.context import (
    ExecutionContext,
    RepoContext,
    require_tool,
    require_working_tree,
)
from repokit.errors import ErrorKind, OperationError
from repokit.git.repo import current_repo_identity
from repokit.logger import logger

from .models import GithubUser
from .responses import classify_result


def is_authenticated(ctx: ExecutionContext) -> bool:
    return ctx.run(["gh", "auth", "status", "--hostname", ctx.settings.host]).ok


def require_authenticated(ctx: ExecutionContext) -> None:
    require_tool(ctx, "gh")
    if not is_authenticated(ctx):
        raise OperationError(
            ErrorKind.AUTHENTICATION,
            f"Not logged in to {ctx.settings.host}. Run 'gh auth login' first.",
        )


def resolve_repo_context(ctx: ExecutionContext) -> RepoContext:
    """Run every prerequisite check for a hosted-repository operation.

    The checks run in order and stop at the first failure: gh installed,
    gh authenticated, inside a working tree, git installed, remote URL
    parseable.
    """
    require_authenticated(ctx)
    require_working_tree(ctx)
    require_tool(ctx, "git")
    identity = current_repo_identity(ctx)
    logger.debug(f"Resolved repository {identity.slug}")
    return RepoContext(context=ctx, identity=identity)


def authenticated_login(ctx: ExecutionContext) -> str:
    result = ctx.run(["gh", "api", "user"])
    if not result.ok:
        raise OperationError(
            classify_result(result),
            f"Failed to look up the authenticated user: {result.error_text()}",
        )
    return GithubUser.model_validate_json(result.stdout).login


def reauthenticate(ctx: ExecutionContext) -> bool:
    """Log out of the hosted service and optionally log back in.

    Returns True if the user ended up logged in again.
    """
    require_tool(ctx, "gh")
    host = ctx.settings.host
    ctx.step(
        ["gh", "auth", "logout", "--hostname", host],
        f"Failed to log out of {host}",
        interactive=True,
    )
    logger.info(f"Logged out of {host}.")

    if not ctx.prompter.confirm(f"Log in to {host} again?"):
        logger.info("Staying logged out.")
        return False

    ctx.step(
        ["gh", "auth", "login", "--hostname", host],
        f"Failed to log in to {host}",
        interactive=True,
    )
    logger.info(f"Logged in to {host}.")
    return True


def request_delete_scope(ctx: ExecutionContext) -> bool:
    """Ask gh to refresh the token with the scope needed to delete repositories."""
    logger.info("Requesting the 'delete_repo' permission from gh.")
    result = ctx.run(
        ["gh", "auth", "refresh", "--hostname", ctx.settings.host, "--scopes", "delete_repo"],
        interactive=True,
    )
    if not result.ok:
        logger.error("Failed to refresh gh credentials.")
    return result.ok

from repokit.context import ExecutionContext, require_tool, require_working_tree
from repokit.errors import require_argument
from repokit.logger import logger

from .branches import get_current_branch_name, get_upstream_branch_name


def _require_git_working_tree(ctx: ExecutionContext) -> None:
    require_tool(ctx, "git")
    require_working_tree(ctx)


def _commit_and_push(ctx: ExecutionContext, message: str) -> None:
    ctx.step(["git", "add", "-A"], "Failed to stage changes")
    ctx.step(["git", "commit", "-m", message], "Failed to commit")
    logger.info(f"Committed: {message}")

    branch = get_current_branch_name(ctx)
    if get_upstream_branch_name(ctx, branch) is None:
        remote = ctx.settings.remote
        logger.info(f"Branch '{branch}' has no upstream, setting it to {remote}/{branch}.")
        ctx.step(
            ["git", "push", "--set-upstream", remote, branch],
            f"Failed to push '{branch}'",
        )
    else:
        ctx.step(["git", "push"], f"Failed to push '{branch}'")
    logger.info(f"Pushed '{branch}'.")


def commit_and_push(ctx: ExecutionContext, message: str | None) -> None:
    """Stage everything, commit, and push the current branch."""
    commit_message = require_argument(message, "commit message")
    _require_git_working_tree(ctx)
    _commit_and_push(ctx, commit_message)


def pull_latest(ctx: ExecutionContext) -> None:
    _require_git_working_tree(ctx)
    ctx.step(["git", "pull"], "Failed to pull")
    logger.info("Pulled the latest changes.")


def pull_commit_push(ctx: ExecutionContext, message: str | None) -> None:
    """Pull, then stage everything, commit, and push."""
    commit_message = require_argument(message, "commit message")
    _require_git_working_tree(ctx)
    ctx.step(["git", "pull"], "Failed to pull")
    logger.info("Pulled the latest changes.")
    _commit_and_push(ctx, commit_message)

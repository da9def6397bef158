from repokit.context import ExecutionContext, require_tool, require_working_tree
from repokit.errors import ErrorKind, OperationError, require_argument
from repokit.logger import logger


def get_current_branch_name(ctx: ExecutionContext) -> str:
    result = ctx.step(
        ["git", "rev-parse", "--abbrev-ref", "HEAD"],
        "Failed to read the current branch",
    )
    return result.stdout.strip()


def get_upstream_branch_name(ctx: ExecutionContext, branch: str) -> str | None:
    result = ctx.run(
        ["git", "rev-parse", "--abbrev-ref", "--symbolic-full-name", f"{branch}@{{u}}"]
    )
    if not result.ok:
        return None
    return result.stdout.strip() or None


def local_branch_exists(ctx: ExecutionContext, branch: str) -> bool:
    result = ctx.run(["git", "rev-parse", "--verify", "--quiet", f"refs/heads/{branch}"])
    return result.ok


def switch_or_create_branch(ctx: ExecutionContext, branch: str | None) -> str:
    """Switch to a local branch, creating it from the current position if needed.

    Returns the name of the branch checked out afterwards.
    """
    branch_name = require_argument(branch, "branch name")
    require_tool(ctx, "git")
    require_working_tree(ctx)

    if local_branch_exists(ctx, branch_name):
        ctx.step(["git", "switch", branch_name], f"Failed to switch to '{branch_name}'")
    else:
        logger.info(f"Branch '{branch_name}' does not exist, creating it.")
        ctx.step(
            ["git", "switch", "-c", branch_name],
            f"Failed to create branch '{branch_name}'",
        )

    current = get_current_branch_name(ctx)
    logger.info(f"Now on branch '{current}'.")
    return current


def delete_branch(ctx: ExecutionContext, branch: str | None, local_only: bool = False) -> None:
    branch_name = require_argument(branch, "branch name")
    require_tool(ctx, "git")
    require_working_tree(ctx)

    if get_current_branch_name(ctx) == branch_name:
        raise OperationError(
            ErrorKind.VALIDATION,
            f"Cannot delete '{branch_name}' because it is currently checked out.",
        )
    if not local_branch_exists(ctx, branch_name):
        raise OperationError(
            ErrorKind.NOT_FOUND, f"Branch '{branch_name}' does not exist locally."
        )

    ctx.step(
        ["git", "branch", "-d", branch_name],
        f"Failed to delete local branch '{branch_name}'",
    )
    logger.info(f"Deleted local branch '{branch_name}'.")

    if local_only:
        return

    remote = ctx.settings.remote
    ctx.step(
        ["git", "push", remote, "--delete", branch_name],
        f"Failed to delete '{branch_name}' on {remote}",
    )
    logger.info(f"Deleted remote branch '{remote}/{branch_name}'.")

import shutil

from repokit.context import (
    ExecutionContext,
    RepoContext,
    confirm_destructive,
    is_working_tree,
    require_tool,
)
from repokit.errors import ErrorKind, OperationError, require_argument
from repokit.git.exec import CommandResult
from repokit.git.repo import get_remote_url, parse_repo_identity
from repokit.logger import logger

from .auth import (
    authenticated_login,
    request_delete_scope,
    require_authenticated,
    resolve_repo_context,
)
from .models import RepoSummary, RepoView, Visibility, repo_summaries
from .responses import classify_result

DEFAULT_COMMIT_MESSAGE = "Initial commit"
SETTABLE_VISIBILITIES = (Visibility.PUBLIC, Visibility.PRIVATE)


def parse_visibility(value: str | None) -> Visibility:
    visibility = require_argument(value, "visibility").lower()
    for option in SETTABLE_VISIBILITIES:
        if option.value == visibility:
            return option
    raise OperationError(
        ErrorKind.VALIDATION,
        f"Visibility must be 'public' or 'private', got '{visibility}'.",
    )


def _raise_for_result(result: CommandResult, failure: str) -> None:
    if not result.ok:
        raise OperationError(classify_result(result), f"{failure}: {result.error_text()}")


def create_repository(ctx: ExecutionContext, name: str | None) -> str:
    """Create a hosted repository from the current directory and push it.

    Prompts for the initial commit message and the visibility. Returns the
    visibility the repository was created with.
    """
    repo_name = require_argument(name, "repository name")
    require_authenticated(ctx)
    require_tool(ctx, "git")

    message = ctx.prompter.ask("Commit message", default=DEFAULT_COMMIT_MESSAGE).strip()
    visibility = parse_visibility(
        ctx.prompter.ask("Visibility (public/private)", default=Visibility.PUBLIC.value)
    )

    if not is_working_tree(ctx.cwd):
        ctx.step(["git", "init"], "Failed to initialize a git repository")
        logger.info(f"Initialized a git repository in {ctx.cwd}.")
    ctx.step(["git", "add", "-A"], "Failed to stage changes")
    ctx.step(
        ["git", "commit", "-m", message or DEFAULT_COMMIT_MESSAGE],
        "Failed to commit",
    )

    result = ctx.run(
        [
            "gh",
            "repo",
            "create",
            repo_name,
            f"--{visibility.value}",
            "--source",
            ".",
            "--remote",
            ctx.settings.remote,
            "--push",
        ]
    )
    _raise_for_result(result, f"Failed to create repository '{repo_name}'")
    logger.info(f"Created {visibility.value} repository '{repo_name}' and pushed to it.")
    return visibility.value


def _delete_remote(ctx: ExecutionContext, slug: str) -> CommandResult:
    return ctx.run(["gh", "repo", "delete", slug, "--yes"])


def _remove_local_metadata(ctx: ExecutionContext, slug: str) -> None:
    git_dir = ctx.cwd / ".git"
    if not git_dir.is_dir():
        return
    remote_url = get_remote_url(ctx)
    identity = parse_repo_identity(remote_url, ctx.settings.host) if remote_url else None
    if identity is None or identity.slug.lower() != slug.lower():
        logger.info(f"{ctx.cwd} is not a checkout of {slug}; leaving its .git directory.")
        return
    shutil.rmtree(git_dir)
    logger.info(f"Removed {git_dir}.")


def delete_repository(ctx: ExecutionContext, name: str | None) -> None:
    """Delete a hosted repository after the user types the confirmation word.

    A permission failure triggers one credential refresh and one retry. The
    local .git directory of a checkout of the repository is removed whatever
    the remote outcome.
    """
    repo_name = require_argument(name, "repository name")
    require_authenticated(ctx)
    if is_working_tree(ctx.cwd):
        require_tool(ctx, "git")
    slug = repo_name if "/" in repo_name else f"{authenticated_login(ctx)}/{repo_name}"

    confirm_destructive(ctx.prompter, f"This permanently deletes {slug}.")

    result = _delete_remote(ctx, slug)
    if not result.ok and classify_result(result) is ErrorKind.PERMISSION_DENIED:
        logger.warning(f"Permission denied deleting {slug}.")
        if request_delete_scope(ctx):
            result = _delete_remote(ctx, slug)

    _remove_local_metadata(ctx, slug)
    _raise_for_result(result, f"Failed to delete {slug}")
    logger.info(f"Deleted {slug}.")


def list_repositories(
    ctx: ExecutionContext, owner: str | None = None, limit: int | None = None
) -> list[RepoSummary]:
    require_authenticated(ctx)
    cmd = ["gh", "repo", "list"]
    if owner:
        cmd.append(owner)
    cmd += [
        "--json",
        "name,visibility",
        "--limit",
        str(limit or ctx.settings.repo_list_limit),
    ]
    result = ctx.run(cmd)
    _raise_for_result(result, "Failed to list repositories")
    return repo_summaries.validate_json(result.stdout or "[]")


def format_repository_table(repos: list[RepoSummary]) -> list[str]:
    name_width = max([len("NAME"), *(len(repo.name) for repo in repos)])
    lines = [f"{'NAME':<{name_width}}  VISIBILITY"]
    lines += [f"{repo.name:<{name_width}}  {repo.visibility.value}" for repo in repos]
    return lines


def get_repo_view(repo: RepoContext) -> RepoView:
    result = repo.context.run(
        [
            "gh",
            "repo",
            "view",
            repo.identity.slug,
            "--json",
            "visibility",
        ]
    )
    _raise_for_result(result, f"Failed to read {repo.identity.slug}")
    return RepoView.model_validate_json(result.stdout)


def change_visibility(ctx: ExecutionContext, visibility: str | None) -> bool:
    """Set the repository visibility, skipping the change if it already matches.

    Returns True if a change was made.
    """
    requested = parse_visibility(visibility)
    repo = resolve_repo_context(ctx)

    current = get_repo_view(repo).visibility
    if current is requested:
        logger.info(f"{repo.identity.slug} is already {requested.value}; nothing to change.")
        return False

    result = repo.context.run(
        [
            "gh",
            "repo",
            "edit",
            repo.identity.slug,
            "--visibility",
            requested.value,
            "--accept-visibility-change-consequences",
        ]
    )
    _raise_for_result(result, f"Failed to change visibility of {repo.identity.slug}")
    logger.info(f"{repo.identity.slug} is now {requested.value}.")
    return True


def set_default_branch(ctx: ExecutionContext, branch: str | None) -> None:
    branch_name = require_argument(branch, "branch name")
    repo = resolve_repo_context(ctx)
    result = repo.context.run(
        ["gh", "repo", "edit", repo.identity.slug, "--default-branch", branch_name]
    )
    _raise_for_result(
        result, f"Failed to set the default branch of {repo.identity.slug}"
    )
    logger.info(f"Default branch of {repo.identity.slug} is now '{branch_name}'.")

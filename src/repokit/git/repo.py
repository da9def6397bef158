import re

from repokit.context import ExecutionContext, RepoIdentity
from repokit.errors import ErrorKind, OperationError


def parse_repo_identity(remote_url: str, host: str = "github.com") -> RepoIdentity | None:
    """Extract the owner and repository name from a remote URL.

    Handles both forms:
        https://github.com/org/repo(.git)
        git@github.com:org/repo(.git)
    """
    match = re.search(
        rf"{re.escape(host)}[/:](?P<owner>[^/:\s]+)/(?P<name>[^/\s]+?)(?:\.git)?/?$",
        remote_url.strip(),
    )
    if not match:
        return None
    return RepoIdentity(owner=match.group("owner"), name=match.group("name"))


def get_remote_url(ctx: ExecutionContext) -> str | None:
    result = ctx.run(["git", "config", "--get", f"remote.{ctx.settings.remote}.url"])
    if not result.ok:
        return None
    return result.stdout.strip() or None


def current_repo_identity(ctx: ExecutionContext) -> RepoIdentity:
    """Get the owner/name pair for the repository in the context's directory."""
    remote_url = get_remote_url(ctx)
    if remote_url is None:
        raise OperationError(
            ErrorKind.IDENTITY,
            f"Could not determine repository owner/name: remote "
            f"'{ctx.settings.remote}' is not configured.",
        )
    identity = parse_repo_identity(remote_url, ctx.settings.host)
    if identity is None:
        raise OperationError(
            ErrorKind.IDENTITY,
            f"Could not determine repository owner/name from remote URL '{remote_url}'.",
        )
    return identity

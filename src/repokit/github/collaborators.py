from dataclasses import dataclass

import httpx

from repokit.context import ExecutionContext, RepoContext, confirm_destructive
from repokit.errors import ErrorKind, OperationError
from repokit.logger import logger

from .auth import resolve_repo_context
from .responses import ApiResponse, classify_status, parse_api_response

PERMISSIONS = ("pull", "triage", "push", "maintain", "admin")


@dataclass(frozen=True)
class CollaboratorOutcome:
    username: str
    kind: ErrorKind | None
    message: str

    @property
    def ok(self) -> bool:
        return self.kind is None


def parse_usernames(users: str | None) -> list[str]:
    """Split a comma-separated user list, dropping blanks and repeats."""
    usernames: list[str] = []
    for raw in (users or "").split(","):
        username = raw.strip().lstrip("@")
        if username and username not in usernames:
            usernames.append(username)
    if not usernames:
        raise OperationError(
            ErrorKind.VALIDATION, "At least one username is required (comma-separated)."
        )
    return usernames


def _api(repo: RepoContext, *args: str) -> ApiResponse:
    result = repo.runner.run(["gh", "api", "--include", *args], cwd=repo.context.cwd)
    return parse_api_response(result)


def _failure(username: str, response: ApiResponse, action: str) -> CollaboratorOutcome:
    kind = classify_status(response.status)
    if kind is ErrorKind.NOT_FOUND:
        message = f"Could not {action} '{username}': not found."
    elif kind is ErrorKind.PERMISSION_DENIED:
        message = f"Could not {action} '{username}': permission denied."
    elif kind is ErrorKind.CONFLICT:
        message = f"Could not {action} '{username}': request conflicts with current state."
    else:
        message = f"Could not {action} '{username}': {response.result.error_text()}"
    logger.warning(message)
    return CollaboratorOutcome(username, kind, message)


def _add_one(repo: RepoContext, username: str, permission: str) -> CollaboratorOutcome:
    user = _api(repo, f"users/{username}")
    if not user.ok:
        if user.status == httpx.codes.NOT_FOUND:
            message = f"User '{username}' does not exist."
            logger.warning(message)
            return CollaboratorOutcome(username, ErrorKind.NOT_FOUND, message)
        return _failure(username, user, "look up")

    response = _api(
        repo,
        "--method",
        "PUT",
        f"repos/{repo.identity.slug}/collaborators/{username}",
        "-f",
        f"permission={permission}",
    )
    if response.status == httpx.codes.NO_CONTENT:
        message = f"'{username}' is already a collaborator on {repo.identity.slug}."
        logger.warning(message)
        return CollaboratorOutcome(username, ErrorKind.CONFLICT, message)
    if not response.ok:
        return _failure(username, response, "add")

    message = f"Invited '{username}' to {repo.identity.slug} with {permission} permission."
    logger.info(message)
    return CollaboratorOutcome(username, None, message)


def _remove_one(repo: RepoContext, username: str) -> CollaboratorOutcome:
    response = _api(
        repo,
        "--method",
        "DELETE",
        f"repos/{repo.identity.slug}/collaborators/{username}",
    )
    if not response.ok:
        return _failure(username, response, "remove")

    message = f"Removed '{username}' from {repo.identity.slug}."
    logger.info(message)
    return CollaboratorOutcome(username, None, message)


def add_collaborators(
    ctx: ExecutionContext, users: str | None, permission: str = "push"
) -> list[CollaboratorOutcome]:
    """Add each user as a collaborator on the current repository.

    Users are processed in order; a failure for one user is reported and the
    rest are still attempted.
    """
    usernames = parse_usernames(users)
    if permission not in PERMISSIONS:
        raise OperationError(
            ErrorKind.VALIDATION,
            f"Permission must be one of {', '.join(PERMISSIONS)}, got '{permission}'.",
        )
    repo = resolve_repo_context(ctx)
    return [_add_one(repo, username, permission) for username in usernames]


def remove_collaborators(ctx: ExecutionContext, users: str | None) -> list[CollaboratorOutcome]:
    usernames = parse_usernames(users)
    repo = resolve_repo_context(ctx)
    confirm_destructive(
        repo.prompter,
        f"Remove {', '.join(usernames)} from {repo.identity.slug}?",
    )
    return [_remove_one(repo, username) for username in usernames]

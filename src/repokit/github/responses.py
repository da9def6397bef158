"""Classify `gh` results into error kinds using the HTTP status they report."""

import re
from dataclasses import dataclass

import httpx

from repokit.errors import ErrorKind
from repokit.git.exec import CommandResult

# `gh api --include` prints the response status line before the headers.
_STATUS_LINE = re.compile(r"^HTTP/[\d.]+\s+(\d{3})", re.MULTILINE)
# Otherwise gh mentions the status in its error text, e.g. "(HTTP 404)".
_STATUS_MARKER = re.compile(r"\bHTTP (\d{3})\b")


@dataclass(frozen=True)
class ApiResponse:
    status: int | None
    result: CommandResult

    @property
    def ok(self) -> bool:
        if self.status is not None:
            return httpx.codes.is_success(self.status)
        return self.result.ok


def response_status(result: CommandResult) -> int | None:
    match = _STATUS_LINE.search(result.stdout)
    if match is None:
        match = _STATUS_MARKER.search(result.stderr) or _STATUS_MARKER.search(
            result.stdout
        )
    if match is None:
        return None
    return int(match.group(1))


def parse_api_response(result: CommandResult) -> ApiResponse:
    return ApiResponse(
        status=response_status(result),
        result=result,
    )


def classify_status(status: int | None) -> ErrorKind:
    if status is None:
        return ErrorKind.STEP_FAILED
    if status == httpx.codes.NOT_FOUND:
        return ErrorKind.NOT_FOUND
    if status in (httpx.codes.CONFLICT, httpx.codes.UNPROCESSABLE_ENTITY):
        return ErrorKind.CONFLICT
    if status == httpx.codes.UNAUTHORIZED:
        return ErrorKind.AUTHENTICATION
    if status == httpx.codes.FORBIDDEN:
        return ErrorKind.PERMISSION_DENIED
    return ErrorKind.STEP_FAILED


def classify_result(result: CommandResult) -> ErrorKind:
    """Error kind for a failed `gh` command.

    Missing OAuth scopes, unknown repositories and GraphQL name clashes are
    reported by gh without an HTTP status, so they are recognised from the text
    before falling back to a generic step failure.
    """
    status = response_status(result)
    if status is not None:
        return classify_status(status)
    if "scope" in result.stderr and "gh auth refresh" in result.stderr:
        return ErrorKind.PERMISSION_DENIED
    if "Could not resolve to a" in result.stderr:
        return ErrorKind.NOT_FOUND
    if "already exists" in result.stderr:
        return ErrorKind.CONFLICT
    return ErrorKind.STEP_FAILED

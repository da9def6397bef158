"""Tests for collaborator management."""

import logging

import pytest

from conftest import api_output
from repokit.errors import ErrorKind, OperationError
from repokit.github.collaborators import (
    add_collaborators,
    parse_usernames,
    remove_collaborators,
)

COLLABORATORS = "repos/acme/widgets/collaborators"


class TestParseUsernames:
    def test_splits_and_strips(self):
        assert parse_usernames(" alice, bob ,,@carol") == ["alice", "bob", "carol"]

    def test_drops_repeats_keeping_order(self):
        assert parse_usernames("bob,alice,bob") == ["bob", "alice"]

    @pytest.mark.parametrize("users", [None, "", " , ,"])
    def test_empty_list(self, users):
        with pytest.raises(OperationError) as excinfo:
            parse_usernames(users)
        assert excinfo.value.kind is ErrorKind.VALIDATION


class TestAddCollaborators:
    def test_missing_user_does_not_stop_the_rest(self, ctx, runner, caplog):
        runner.respond(
            "gh", "api", "--include", "users/ghost404",
            returncode=1,
            stdout=api_output(404, "Not Found", '{"message": "Not Found"}'),
        )
        runner.respond(
            "gh", "api", "--include", "users/validuser",
            stdout=api_output(200, "OK", '{"login": "validuser"}'),
        )
        runner.respond(
            "gh", "api", "--include", "--method", "PUT",
            stdout=api_output(201, "Created", "{}"),
        )

        with caplog.at_level(logging.INFO):
            outcomes = add_collaborators(ctx, "ghost404,validuser")

        assert [outcome.username for outcome in outcomes] == ["ghost404", "validuser"]
        assert outcomes[0].kind is ErrorKind.NOT_FOUND
        assert outcomes[1].ok
        assert "ghost404" in caplog.text
        assert runner.calls_starting_with("gh", "api", "--include", "--method", "PUT") == [
            (
                "gh", "api", "--include", "--method", "PUT",
                f"{COLLABORATORS}/validuser", "-f", "permission=push",
            )
        ]

    def test_already_a_collaborator(self, ctx, runner):
        runner.respond(
            "gh", "api", "--include", "--method", "PUT",
            stdout=api_output(204, "No Content"),
        )

        [outcome] = add_collaborators(ctx, "alice")

        assert outcome.kind is ErrorKind.CONFLICT

    def test_unprocessable_invite(self, ctx, runner):
        runner.respond(
            "gh", "api", "--include", "--method", "PUT",
            returncode=1,
            stdout=api_output(422, "Unprocessable Entity", "{}"),
        )

        [outcome] = add_collaborators(ctx, "alice")

        assert outcome.kind is ErrorKind.CONFLICT

    def test_permission_denied(self, ctx, runner):
        runner.respond(
            "gh", "api", "--include", "--method", "PUT",
            returncode=1,
            stdout=api_output(403, "Forbidden", "{}"),
        )

        [outcome] = add_collaborators(ctx, "alice")

        assert outcome.kind is ErrorKind.PERMISSION_DENIED

    def test_custom_permission(self, ctx, runner):
        add_collaborators(ctx, "alice", permission="maintain")
        assert runner.calls[-1][-1] == "permission=maintain"

    def test_invalid_permission_makes_no_calls(self, ctx, runner):
        with pytest.raises(OperationError) as excinfo:
            add_collaborators(ctx, "alice", permission="owner")
        assert excinfo.value.kind is ErrorKind.VALIDATION
        assert runner.calls == []

    def test_empty_users_makes_no_calls(self, ctx, runner):
        with pytest.raises(OperationError):
            add_collaborators(ctx, "")
        assert runner.calls == []


class TestRemoveCollaborators:
    def test_requires_exact_confirmation(self, ctx, runner, prompter):
        prompter.answers.append("y")

        with pytest.raises(OperationError) as excinfo:
            remove_collaborators(ctx, "alice")

        assert excinfo.value.kind is ErrorKind.CANCELLED
        assert runner.calls_starting_with("gh", "api") == []

    def test_removes_each_user(self, ctx, runner, prompter):
        prompter.answers.append("yes")
        runner.respond(
            "gh", "api", "--include", "--method", "DELETE", f"{COLLABORATORS}/ghost404",
            returncode=1,
            stdout=api_output(404, "Not Found", "{}"),
        )
        runner.respond(
            "gh", "api", "--include", "--method", "DELETE",
            stdout=api_output(204, "No Content"),
        )

        outcomes = remove_collaborators(ctx, "ghost404,alice")

        assert outcomes[0].kind is ErrorKind.NOT_FOUND
        assert outcomes[1].ok
        assert len(runner.calls_starting_with("gh", "api", "--include", "--method", "DELETE")) == 2

    def test_empty_users_makes_no_calls(self, ctx, runner, prompter):
        with pytest.raises(OperationError):
            remove_collaborators(ctx, None)
        assert runner.calls == []
        assert prompter.questions == []

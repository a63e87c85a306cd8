"""Tests for the preflight requirement checks."""

import pytest

from gai.core.context import GaiContext, config_for_test
from gai.core.errors import PreconditionError
from gai.core.preflight import check_requirements
from gai.gateway.github.fake import FakePullRequestHost
from gai.gateway.shell.fake import FakeShell


def test_all_requirements_met() -> None:
    ctx = GaiContext.for_test()

    check_requirements(ctx)


def test_missing_api_key() -> None:
    ctx = GaiContext.for_test(config=config_for_test(api_key=None))

    with pytest.raises(PreconditionError, match="OPENAI_API_KEY"):
        check_requirements(ctx)


def test_missing_git() -> None:
    ctx = GaiContext.for_test(shell=FakeShell(installed_tools={"gh": "/usr/bin/gh"}))

    with pytest.raises(PreconditionError, match="Git not in PATH"):
        check_requirements(ctx)


def test_missing_gh() -> None:
    ctx = GaiContext.for_test(shell=FakeShell(installed_tools={"git": "/usr/bin/git"}))

    with pytest.raises(PreconditionError, match="GitHub CLI not in PATH"):
        check_requirements(ctx)


def test_gh_not_authenticated() -> None:
    ctx = GaiContext.for_test(github=FakePullRequestHost(authenticated=False))

    with pytest.raises(PreconditionError, match="not authenticated"):
        check_requirements(ctx)


@pytest.mark.parametrize("permission", ["ADMIN", "MAINTAIN", "WRITE"])
def test_write_permissions_pass(permission: str) -> None:
    ctx = GaiContext.for_test(github=FakePullRequestHost(viewer_permission=permission))

    check_requirements(ctx)


@pytest.mark.parametrize("permission", ["READ", "TRIAGE", None])
def test_insufficient_permissions(permission: str | None) -> None:
    ctx = GaiContext.for_test(github=FakePullRequestHost(viewer_permission=permission))

    with pytest.raises(PreconditionError, match="write permissions"):
        check_requirements(ctx)

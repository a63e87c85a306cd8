"""Tests for ticket detection from branch names."""

from gai.core.ticket import NO_TICKET, detect_ticket


def test_detects_ticket_in_branch_name() -> None:
    assert detect_ticket("feature/ABC-123-login") == "ABC-123"


def test_returns_sentinel_when_no_ticket() -> None:
    assert detect_ticket("feature/login") == NO_TICKET
    assert NO_TICKET == "NO-TICKET"


def test_returns_first_match() -> None:
    assert detect_ticket("PROJ-1-and-OTHER-22") == "PROJ-1"


def test_lowercase_keys_do_not_match() -> None:
    """Only uppercase project keys count as tickets."""
    assert detect_ticket("fix/abc-123") == NO_TICKET


def test_empty_branch_name() -> None:
    assert detect_ticket("") == NO_TICKET

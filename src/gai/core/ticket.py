"""Ticket reference detection from branch names."""

import re

NO_TICKET = "NO-TICKET"

# Uppercase project key, dash, issue number (e.g. ABC-123)
TICKET_PATTERN = re.compile(r"[A-Z]+-\d+")


def detect_ticket(branch_name: str) -> str:
    """Return the first ticket reference in branch_name, or NO_TICKET.

    Example:
        >>> detect_ticket("feature/ABC-123-login")
        'ABC-123'
        >>> detect_ticket("feature/login")
        'NO-TICKET'
    """
    match = TICKET_PATTERN.search(branch_name)
    if match is None:
        return NO_TICKET
    return match.group(0)

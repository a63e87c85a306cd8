"""Parsing helpers for gh CLI JSON output."""

import json


def parse_pr_numbers(json_str: str) -> list[int]:
    """Parse `gh pr list --json number` output into PR numbers.

    Args:
        json_str: JSON array such as '[{"number": 12}, {"number": 9}]'

    Returns:
        PR numbers in the order gh returned them

    Raises:
        ValueError: If the output is not a JSON array of objects with a number
    """
    data = json.loads(json_str) if json_str.strip() else []
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array from gh pr list, got: {json_str!r}")

    numbers: list[int] = []
    for item in data:
        # LBYL: Validate shape before accessing
        if not isinstance(item, dict) or "number" not in item:
            raise ValueError(f"Unexpected entry in gh pr list output: {item!r}")
        numbers.append(int(item["number"]))
    return numbers


def parse_viewer_permission(json_str: str) -> str | None:
    """Parse `gh repo view --json viewerPermission` output.

    Returns:
        The permission string, or None if absent or unparseable
    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError:
        return None
    if not isinstance(data, dict):
        return None
    permission = data.get("viewerPermission")
    return str(permission) if permission else None

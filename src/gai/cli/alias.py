"""Short command aliases (e.g. `gai c` for `gai commit`)."""

from collections.abc import Callable

import click

_ALIASES_ATTR = "_gai_aliases"


def alias(*names: str) -> Callable[[click.Command], click.Command]:
    """Attach aliases to a click command.

    Apply above @click.command so the decorator receives the command object.
    The aliases take effect when the command is added with
    register_with_aliases().
    """

    def decorator(cmd: click.Command) -> click.Command:
        setattr(cmd, _ALIASES_ATTR, tuple(names))
        return cmd

    return decorator


def get_aliases(cmd: click.Command) -> tuple[str, ...]:
    return getattr(cmd, _ALIASES_ATTR, ())


def register_with_aliases(group: click.Group, cmd: click.Command) -> None:
    """Add cmd to group under its own name and, hidden from help, each alias."""
    group.add_command(cmd)
    for name in get_aliases(cmd):
        group.add_command(_hidden_alias(cmd, name), name=name)


def _hidden_alias(cmd: click.Command, name: str) -> click.Command:
    # Shallow copy so the alias shares callback and params but not visibility
    alias_cmd = click.Command(
        name=name,
        context_settings=cmd.context_settings,
        callback=cmd.callback,
        params=cmd.params,
        help=cmd.help,
        short_help=cmd.short_help,
        hidden=True,
    )
    return alias_cmd

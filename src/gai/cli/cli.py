import os
from pathlib import Path

import click

from gai.cli.alias import register_with_aliases
from gai.cli.banner import show_banner
from gai.cli.commands.commit_cmd import commit_cmd
from gai.cli.commands.instructions_cmd import instructions_cmd
from gai.cli.commands.push_cmd import push_cmd
from gai.cli.commands.shared import enable_verbose_logging
from gai.cli.commands.stash_cmd import stash_cmd
from gai.cli.commands.version_cmd import version_cmd
from gai.cli.help_formatter import GaiCommandGroup
from gai.core.config import GaiConfig, default_config, load_config
from gai.core.context import GaiContext, create_context
from gai.core.errors import ConfigError
from gai.output import report_warning

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

# Commands that still run, on built-in defaults, when the config is invalid
_INFORMATIONAL_COMMANDS = frozenset({"version", "v", "instructions"})


def _load_cli_config(subcommand: str | None) -> GaiConfig:
    try:
        return load_config(os.environ)
    except ConfigError as e:
        if subcommand not in _INFORMATIONAL_COMMANDS:
            raise click.ClickException(str(e)) from e
        report_warning(f"{e} (using built-in defaults)")
        return default_config(os.environ)


@click.group(cls=GaiCommandGroup, context_settings=CONTEXT_SETTINGS)
@click.option("-V", "--verbose", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Automate Git operations with AI assistance."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        config = _load_cli_config(ctx.invoked_subcommand)
        ctx.obj = create_context(config, Path.cwd())

    gai_ctx: GaiContext = ctx.obj
    if verbose or gai_ctx.config.verbose:
        enable_verbose_logging()

    if not ctx.resilient_parsing:
        show_banner()


register_with_aliases(cli, commit_cmd)  # c
register_with_aliases(cli, push_cmd)  # p
register_with_aliases(cli, stash_cmd)  # s
register_with_aliases(cli, version_cmd)  # v
cli.add_command(instructions_cmd)


def main() -> None:
    """CLI entry point used by the `gai` console script."""
    cli()

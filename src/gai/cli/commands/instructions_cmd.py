"""Show which prompt texts gai sends and where to override them."""

import click

from gai.core.context import GaiContext


@click.command("instructions")
@click.option("--show", is_flag=True, help="Print the effective prompt texts")
@click.pass_obj
def instructions_cmd(ctx: GaiContext, *, show: bool) -> None:
    """List prompt override files and whether each is in use."""
    click.echo(click.style(f"Config directory: {ctx.config.config_dir}", bold=True))
    for prompt in ctx.config.prompts.all():
        status = (
            click.style("override", fg="green")
            if prompt.overridden
            else click.style("default", dim=True)
        )
        click.echo(f"  {prompt.name:<10} {status}  {prompt.path}")

    if not show:
        return

    for prompt in ctx.config.prompts.all():
        click.echo("")
        click.echo(click.style(f"--- {prompt.name} ---", fg="cyan", bold=True))
        click.echo(prompt.text.strip())

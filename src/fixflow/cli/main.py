"""
FixFlow CLI: `fixflow` command.

Commands:
  fixflow language show|list|set   Active language
  fixflow translate <text>         Translate into the active language
  fixflow trial <session.json>     Trial banner for a session
  fixflow nav <role>               Role navigation
  fixflow plans                    Subscription plans
"""

import asyncio
import logging

try:
    import click
    from rich.console import Console
    from rich.logging import RichHandler
except ImportError:
    raise SystemExit("CLI requires extras: pip install fixflow[cli]")

from fixflow.client import FixFlow
from fixflow.config import Settings, get_settings
from fixflow.errors import ConfigError

console = Console()


def _settings() -> Settings:
    try:
        return get_settings()
    except ConfigError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)


def _get_app() -> FixFlow:
    return FixFlow(settings=_settings())


def _run(coro):
    return asyncio.run(coro)


@click.group()
@click.version_option("0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging")
def main(verbose: bool):
    """FixFlow CLI: language, trial and navigation state."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


from fixflow.cli.language import language, translate_cmd
from fixflow.cli.account import nav_cmd, plans_cmd, trial_cmd

main.add_command(language)
main.add_command(translate_cmd)
main.add_command(trial_cmd)
main.add_command(nav_cmd)
main.add_command(plans_cmd)


if __name__ == "__main__":
    main()

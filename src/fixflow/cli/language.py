"""CLI: fixflow language show|list|set, fixflow translate"""

from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


def _get_app():
    from fixflow.cli.main import _get_app
    return _get_app()


def _run(coro):
    from fixflow.cli.main import _run
    return _run(coro)


@click.group()
def language():
    """Active language."""


@language.command("show")
def language_show():
    """Show the active language."""

    async def _show():
        async with _get_app() as app:
            click.echo(app.language.current_language)

    _run(_show())


@language.command("list")
def language_list():
    """List available languages."""

    async def _list():
        async with _get_app() as app:
            table = Table(title="Languages")
            table.add_column("Code", style="bold")
            table.add_column("Name")
            table.add_column("Active")
            for lang in app.language.available_languages:
                table.add_row(lang.code, lang.name, "*" if lang.code == app.language.current_language else "")
            console.print(table)

    _run(_list())


@language.command("set")
@click.argument("code")
def language_set(code: str):
    """Switch the active language."""

    async def _set() -> bool:
        async with _get_app() as app:
            app.language.set_language(code)
            return app.language.current_language == code

    if not _run(_set()):
        console.print(f"[yellow]Unsupported language: {escape(code)}[/yellow]")
        raise SystemExit(1)
    console.print(f"[green]Language set to {code}.[/green]")


@click.command("translate")
@click.argument("text")
@click.option("-s", "--source", "source_language", default=None, help="Source language code")
def translate_cmd(text: str, source_language: Optional[str]):
    """Translate TEXT into the active language."""

    async def _translate():
        async with _get_app() as app:
            with console.status("Translating..."):
                result = await app.translate(text, source_language)
            for toast in app.toasts.toasts:
                console.print(f"[yellow]{escape(toast.title or '')}[/yellow]")
            click.echo(result)

    _run(_translate())

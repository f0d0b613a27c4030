"""CLI: fixflow trial, fixflow nav, fixflow plans"""

import json
from typing import Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from fixflow.models.plan import PLAN_CONFIGS
from fixflow.models.session import PlanType, SessionEnvelope
from fixflow.navigation import get_nav_config, role_label
from fixflow.trial import derive_trial_status, format_trial_end_date, trial_banner

console = Console()


def _settings():
    from fixflow.cli.main import _settings
    return _settings()


@click.command("trial")
@click.argument("session_file", type=click.File("r"))
@click.option("--json-output", "--json", is_flag=True)
def trial_cmd(session_file, json_output: bool):
    """Show trial status for a session envelope (JSON file, '-' for stdin)."""
    try:
        envelope = SessionEnvelope.model_validate(json.load(session_file))
    except (json.JSONDecodeError, ValidationError) as e:
        console.print(f"[red]Invalid session: {e}[/red]")
        raise SystemExit(1)

    state = derive_trial_status(envelope)
    if json_output:
        click.echo(json.dumps({
            "status": state.status.value,
            "daysRemaining": state.days_remaining,
            "trialEndDate": state.trial_end_date.isoformat() if state.trial_end_date else None,
        }))
        return

    banner = trial_banner(state, threshold=_settings().trial_ending_soon_days)
    if banner is None:
        console.print(f"[dim]Subscription: {state.status.value}[/dim]")
        return
    body = banner.message
    if state.trial_end_date:
        body += f"\n[dim]Ends {format_trial_end_date(state.trial_end_date)}[/dim]"
    console.print(Panel(body, title=banner.title, subtitle=banner.button_text,
                        border_style="yellow" if banner.urgent else "blue"))


@click.command("nav")
@click.argument("role")
@click.option("--plan", "plan_type", type=click.Choice([p.value for p in PlanType], case_sensitive=False))
def nav_cmd(role: str, plan_type: Optional[str]):
    """Show navigation for ROLE."""
    config = get_nav_config(role, plan_type)
    table = Table(title=f"{config.title}: {role_label(role)}")
    table.add_column("Name", style="bold")
    table.add_column("Path")
    table.add_column("Description")
    for link in config.links:
        table.add_row(link.name, link.href, link.description)
    console.print(table)


@click.command("plans")
def plans_cmd():
    """List subscription plans."""
    table = Table(title="Plans")
    table.add_column("Plan", style="bold")
    table.add_column("Price")
    table.add_column("Features")
    for plan in PLAN_CONFIGS.values():
        price = f"${plan.price}/mo" if plan.price else "Custom"
        name = f"{plan.name} (popular)" if plan.is_popular else plan.name
        table.add_row(name, price, ", ".join(plan.features))
    console.print(table)

"""Group and user CLI commands."""

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from netaccess.client.client import NetAccessClient
from netaccess.client.errors import ClientError

groups_app = typer.Typer(no_args_is_help=True)
users_app = typer.Typer(no_args_is_help=True)
console = Console()


async def _list_groups() -> None:
    async with NetAccessClient() as client:
        try:
            groups = await client.groups.list()
        except ClientError as e:
            console.print(f"[red]Failed to fetch groups: {e}[/red]")
            raise typer.Exit(1)

    if not groups:
        console.print("[yellow]No groups found.[/yellow]")
        return

    table = Table(title="Groups", border_style="cyan")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="bold cyan")
    table.add_column("Type", style="yellow")
    table.add_column("Active", justify="center")

    for group in groups:
        table.add_row(group.id, group.name, group.type, "[green]Yes[/green]" if group.is_active else "No")

    console.print(table)


async def _list_users(manual_only: bool) -> None:
    async with NetAccessClient() as client:
        try:
            users = await client.users.list()
        except ClientError as e:
            console.print(f"[red]Failed to fetch users: {e}[/red]")
            raise typer.Exit(1)

    if manual_only:
        users = [user for user in users if user.type == "MANUAL"]

    if not users:
        console.print("[yellow]No users found.[/yellow]")
        return

    table = Table(title="Users", border_style="cyan")
    table.add_column("ID", style="dim")
    table.add_column("Email", style="bold cyan")
    table.add_column("Name", style="white")
    table.add_column("Role", style="yellow")
    table.add_column("Type", style="white")
    table.add_column("Active", justify="center")

    for user in users:
        table.add_row(
            user.id,
            user.email,
            f"{user.first_name} {user.last_name}".strip() or "N/A",
            user.role,
            user.type or "N/A",
            "[green]Yes[/green]" if user.is_active else "No",
        )

    console.print(table)
    console.print(f"\n[dim]Showing {len(users)} users[/dim]")


@groups_app.command("list")
def list_groups() -> None:
    """List all groups."""
    asyncio.run(_list_groups())


@users_app.command("list")
def list_users(
    manual_only: bool = typer.Option(False, "--manual-only", help="Only users this provider may modify"),
) -> None:
    """List all users."""
    asyncio.run(_list_users(manual_only))

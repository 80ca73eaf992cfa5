"""Connector, remote network and resource CLI commands."""

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from netaccess.client.client import NetAccessClient
from netaccess.client.errors import ClientError

connectors_app = typer.Typer(no_args_is_help=True)
remote_networks_app = typer.Typer(no_args_is_help=True)
resources_app = typer.Typer(no_args_is_help=True)
console = Console()


async def _list_connectors() -> None:
    """List connectors in server order."""
    async with NetAccessClient() as client:
        try:
            connectors = await client.connectors.list()
        except ClientError as e:
            console.print(f"[red]Failed to fetch connectors: {e}[/red]")
            raise typer.Exit(1)

    if not connectors:
        console.print("[yellow]No connectors found.[/yellow]")
        return

    table = Table(title="Connectors", border_style="cyan")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="bold cyan")
    table.add_column("Remote Network", style="white")
    table.add_column("Notifications", justify="center")

    for connector in connectors:
        table.add_row(
            connector.id,
            connector.name,
            connector.remote_network_id or "N/A",
            "[green]On[/green]" if connector.status_updates_enabled else "Off",
        )

    console.print(table)
    console.print(f"\n[dim]Showing {len(connectors)} connectors[/dim]")


async def _list_remote_networks() -> None:
    async with NetAccessClient() as client:
        try:
            networks = await client.remote_networks.list()
        except ClientError as e:
            console.print(f"[red]Failed to fetch remote networks: {e}[/red]")
            raise typer.Exit(1)

    if not networks:
        console.print("[yellow]No remote networks found.[/yellow]")
        return

    table = Table(title="Remote Networks", border_style="cyan")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="bold cyan")
    table.add_column("Location", style="yellow")

    for network in networks:
        table.add_row(network.id, network.name, network.location)

    console.print(table)


async def _find_resources(name: str) -> None:
    async with NetAccessClient() as client:
        try:
            resources = await client.resources.read_by_name(name)
        except ClientError as e:
            console.print(f"[red]Failed to fetch resources: {e}[/red]")
            raise typer.Exit(1)

    if not resources:
        console.print(f"[yellow]No resources named {name}.[/yellow]")
        return

    table = Table(title=f"Resources named {name}", border_style="cyan")
    table.add_column("ID", style="dim")
    table.add_column("Address", style="bold cyan")
    table.add_column("Remote Network", style="white")
    table.add_column("TCP", style="green")
    table.add_column("UDP", style="green")

    for resource in resources:
        protocols = resource.protocols
        table.add_row(
            resource.id,
            resource.address,
            resource.remote_network_id,
            protocols.tcp.policy if protocols else "ALLOW_ALL",
            protocols.udp.policy if protocols else "ALLOW_ALL",
        )

    console.print(table)


@connectors_app.command("list")
def list_connectors() -> None:
    """List all connectors."""
    asyncio.run(_list_connectors())


@remote_networks_app.command("list")
def list_remote_networks() -> None:
    """List all remote networks."""
    asyncio.run(_list_remote_networks())


@resources_app.command("find")
def find_resources(name: str = typer.Argument(..., help="Exact resource name")) -> None:
    """Find resources by name."""
    asyncio.run(_find_resources(name))

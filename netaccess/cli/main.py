"""netaccess CLI - Main entry point."""

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from netaccess import __version__
from netaccess.cli.identity_commands import groups_app, users_app
from netaccess.cli.network_commands import connectors_app, remote_networks_app, resources_app
from netaccess.config import get_settings
from netaccess.observability import configure_logging
from netaccess.provider.provider import DATA_SOURCES, RESOURCES

app = typer.Typer(
    name="netaccess",
    help="netaccess - inspect the access control API the provider manages",
    no_args_is_help=True,
)

app.add_typer(connectors_app, name="connectors", help="Connector operations")
app.add_typer(remote_networks_app, name="remote-networks", help="Remote network operations")
app.add_typer(resources_app, name="resources", help="Resource operations")
app.add_typer(groups_app, name="groups", help="Group operations")
app.add_typer(users_app, name="users", help="User operations")

console = Console()


@app.callback()
def main() -> None:
    """Load .env and configure logging before any command runs."""
    load_dotenv()
    configure_logging(get_settings().log_level)


@app.command()
def status() -> None:
    """Show provider configuration."""
    settings = get_settings()

    console.print(
        Panel(
            f"[bold cyan]netaccess-provider[/bold cyan] {__version__}",
            title="Provider Status",
            border_style="cyan",
        )
    )

    table = Table(border_style="cyan")
    table.add_column("Setting", style="bold white")
    table.add_column("Status", justify="center")
    table.add_column("Details", style="dim")

    token_status = "[green]Set[/green]" if settings.api_token else "[red]Missing API Token[/red]"
    table.add_row("API Token", token_status, "NETACCESS_API_TOKEN")

    endpoint_configured = bool(settings.endpoint or settings.network)
    endpoint_status = "[green]Configured[/green]" if endpoint_configured else "[yellow]Not configured[/yellow]"
    table.add_row("GraphQL Endpoint", endpoint_status, settings.graphql_server_url)

    table.add_row("Resources", "[cyan]Available[/cyan]", ", ".join(sorted(RESOURCES)))
    table.add_row("Data Sources", "[cyan]Available[/cyan]", ", ".join(sorted(DATA_SOURCES)))

    console.print(table)


if __name__ == "__main__":
    app()

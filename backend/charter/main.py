"""
Command line entry point for the charter backend.

Run the REST API, create the schema, and query the airport catalog and
cost estimator without going through HTTP.
"""

import typer
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .database import initialize_database
from .services import TripCostEstimator, load_airport_catalog
from .services.errors import CharterError
from .utils.config import configure_logging, get_config

app = typer.Typer(help="Charter flight management backend")
console = Console()


@app.callback()
def main(
    log_level: str = typer.Option(None, "--log-level", help="Override CHARTER_LOG_LEVEL"),
):
    config = get_config()
    configure_logging(log_level or config.log_level)


@app.command()
def serve(
    host: str = typer.Option(None, "--host", help="Bind address (defaults to API_HOST)"),
    port: int = typer.Option(None, "--port", "-p", help="Port (defaults to API_PORT)"),
):
    """Run the REST API with uvicorn."""
    import uvicorn

    from .api import build_app

    config = get_config()
    uvicorn.run(build_app(config), host=host or config.api_host, port=port or config.api_port)


@app.command("init-db")
def init_db():
    """Create all tables in the configured database."""
    config = get_config()
    db = initialize_database(config.database_url, create_tables=True)
    console.print(f"[green]✓[/green] Schema ready on {db.db_type}")
    db.close()


@app.command()
def search(
    query: str = typer.Argument(..., help="ICAO, IATA, name or city fragment"),
    limit: int = typer.Option(None, "--limit", "-n", help="Maximum results"),
):
    """Search the airport catalog."""
    config = get_config()
    catalog = load_airport_catalog(config.airports_file)
    results = catalog.search(query, limit or config.airport_search_limit)

    if not results:
        console.print(f"[yellow]No airports match '{query}'[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Airports matching '{query}'", box=box.ROUNDED)
    table.add_column("ICAO", style="cyan bold")
    table.add_column("IATA", style="cyan")
    table.add_column("Name", style="white")
    table.add_column("City", style="white")
    table.add_column("Country", style="dim")
    table.add_column("Lon, Lat", style="magenta", justify="right")

    for airport in results:
        lon, lat = airport.coordinates
        table.add_row(
            airport.icao,
            airport.iata or "",
            airport.name,
            airport.city,
            airport.country,
            f"{lon:.4f}, {lat:.4f}",
        )
    console.print(table)


@app.command()
def estimate(
    departure: str = typer.Argument(..., help="Departure ICAO code"),
    arrival: str = typer.Argument(..., help="Arrival ICAO code"),
    engines: int = typer.Option(2, "--engines", "-e", help="Number of engines"),
):
    """Estimate distance, fuel and total cost for a trip."""
    config = get_config()
    estimator = TripCostEstimator(load_airport_catalog(config.airports_file))

    try:
        costs = estimator.estimate(departure, arrival, engines)
    except CharterError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1)

    table = Table(box=box.ROUNDED, show_header=False)
    table.add_column("Item", style="cyan bold")
    table.add_column("Value", style="white", justify="right")
    table.add_row("Distance", f"{costs.distance_nm:,.1f} nm")
    table.add_row("Fuel", f"{costs.fuel_gallons:,.1f} gal")
    table.add_row("Fuel cost", f"${costs.fuel_cost:,}")
    table.add_row("Total cost", f"[green bold]${costs.total_cost:,}[/green bold]")

    console.print(Panel.fit(
        f"[bold cyan]{departure.upper()} -> {arrival.upper()}[/bold cyan] ({engines} engines)",
        border_style="cyan",
    ))
    console.print(table)


if __name__ == "__main__":
    app()

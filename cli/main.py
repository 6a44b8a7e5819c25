"""Odoo Preflight CLI - host capacity check for Odoo installations."""
import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.logging import RichHandler
from rich.markup import escape

from preflight_core import api
from preflight_core.classifier import minimum_requirements_table
from preflight_core.config import get_config, get_config_manager
from preflight_core.exceptions import PreflightError
from preflight_core.schemas import InstallMethod, Report

logger = logging.getLogger("preflight")

# Rich console for pretty output
console = Console()

# CLI app
app = typer.Typer(
    name="odoo-preflight",
    help="Odoo Preflight - checks this machine and recommends how to install Odoo",
)

config_app = typer.Typer(help="Configuration commands")
app.add_typer(config_app, name="config")


def setup_logging() -> None:
    level = get_config().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def handle_error(e: Exception) -> None:
    """Handle and display errors nicely."""
    if isinstance(e, PreflightError):
        console.print(f"[red]Error:[/red] {e}")
    else:
        console.print(f"[red]Unexpected error:[/red] {e}")
        logger.exception("Unexpected error")
    raise typer.Exit(1)


def print_summary(report: Report, path: Path) -> None:
    """Print the human-readable summary of a report."""
    hw = report.hardware
    install = report.installation

    # Detected values are host-provided text, never markup
    console.print(f"Análisis completado. Archivo JSON generado: [cyan]{escape(str(path))}[/cyan]")
    console.print("\n[bold]Resumen:[/bold]")
    console.print(f"- Sistema: {escape(report.operating_system.name)}")
    console.print(f"- CPU: {hw.cpu.cores} núcleos ({escape(hw.cpu.model)})")
    console.print(f"- RAM: {hw.ram_gb}GB")
    console.print(f"- Almacenamiento: {hw.storage.free_gb}GB ({escape(hw.storage.type)})")
    console.print(f"- Categoría: {report.tier.value}")
    console.print(f"- Método de instalación: {install.method.value}")

    if install.method == InstallMethod.WEB:
        console.print(
            "\n[yellow]⚠️  RECOMENDACIÓN: Usar Odoo Web debido a limitaciones de hardware o SO[/yellow]"
        )
        console.print(f"   URL: [cyan]{escape(report.web_setup.suggested_url)}[/cyan]")
        console.print("   Crear cuenta con usuario y contraseña personalizada")


# ============================================================================
# Analysis (default command)
# ============================================================================

@app.callback(invoke_without_command=True)
def analyze_cmd(
    ctx: typer.Context,
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Report file (default from config)"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not print the JSON report"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Analyze this machine and write the installation recommendation."""
    if ctx.invoked_subcommand is not None:
        return

    try:
        manager = get_config_manager()
        if output is not None:
            manager.update(output_path=str(output))
        if verbose:
            manager.update(log_level="DEBUG")
        setup_logging()

        console.print("Analizando sistema para instalación de Odoo...")
        report, path = api.run_analysis()
        print_summary(report, path)

        if not quiet:
            console.print("\n[bold]Contenido del JSON generado:[/bold]")
            console.print(path.read_text(encoding="utf-8"), markup=False, highlight=False, soft_wrap=True)

    except Exception as e:
        handle_error(e)


# ============================================================================
# Config Commands
# ============================================================================

@config_app.command("show")
def show_config_cmd():
    """Show current configuration."""
    config = get_config()
    console.print("\n[bold]Preflight Configuration:[/bold]")
    for key, value in config.model_dump().items():
        console.print(f"  {key}: {value}")


@config_app.command("path")
def config_path_cmd():
    """Show configuration file path."""
    manager = get_config_manager()
    console.print(f"Config file: {manager.config_path}")


# ============================================================================
# Root Commands
# ============================================================================

@app.command("thresholds")
def thresholds_cmd():
    """Show the minimum hardware for each user tier."""
    table = Table(title="Requisitos mínimos")
    table.add_column("Categoría", style="cyan")
    table.add_column("CPU (núcleos)")
    table.add_column("RAM (GB)")
    table.add_column("Almacenamiento (GB)")

    for tier, req in minimum_requirements_table().items():
        table.add_row(tier, str(req.cpu_cores), str(req.ram_gb), str(req.storage_gb))

    console.print(table)


@app.command("version")
def version_cmd():
    """Show Odoo Preflight version."""
    from preflight_core import __version__
    console.print(f"Odoo Preflight v{__version__}")


def main():
    """Main entry point."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[dim]Interrupted[/dim]")
        sys.exit(0)


if __name__ == "__main__":
    main()

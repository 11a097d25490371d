"""hostprobe CLI - Host platform identification command line interface."""
import json
import logging
import sys

import typer
from rich.console import Console
from rich.table import Table
from rich.logging import RichHandler

from hostprobe_core import api
from hostprobe_core.config import get_config
from hostprobe_core.exceptions import HostProbeError

logger = logging.getLogger("hostprobe")

# Rich console for pretty output
console = Console()

# CLI app
app = typer.Typer(
    name="hostprobe",
    help="hostprobe - identify the host platform for toolchain installation",
    no_args_is_help=True,
)

config_app = typer.Typer(help="Configuration commands")
app.add_typer(config_app, name="config")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging with the level from config, or DEBUG when verbose."""
    level = logging.DEBUG if verbose else getattr(logging, get_config().log_level, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def handle_error(e: Exception) -> None:
    """Handle and display errors nicely."""
    if isinstance(e, HostProbeError):
        console.print(f"[red]Error:[/red] {e}")
    else:
        console.print(f"[red]Unexpected error:[/red] {e}")
        logger.exception("Unexpected error")
    raise typer.Exit(1)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug output"),
):
    """hostprobe - identify the host platform for toolchain installation."""
    setup_logging(verbose)


# ============================================================================
# Detection Commands
# ============================================================================

@app.command("detect")
def detect_cmd(
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
):
    """Detect architecture, OS family, distro and version."""
    try:
        request = api.platform_request()
        data = request.to_dict()

        if as_json:
            console.print_json(json.dumps(data))
            return

        table = Table(title="Host Platform")
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        table.add_row("Architecture", data["architecture"])
        table.add_row("Platform", data["platform"])
        table.add_row("Distro", data["distro"] or "[dim]-[/dim]")
        table.add_row("Version", data["version"] or "[dim]unknown[/dim]")
        console.print(table)

    except Exception as e:
        handle_error(e)


# ============================================================================
# Config Commands
# ============================================================================

@config_app.command("show")
def show_config_cmd():
    """Show current configuration."""
    config = get_config()
    console.print("\n[bold]hostprobe Configuration:[/bold]")
    for key, value in config.model_dump().items():
        console.print(f"  {key}: {value}")


@config_app.command("path")
def config_path_cmd():
    """Show configuration file path."""
    from hostprobe_core.config import get_config_manager

    manager = get_config_manager()
    console.print(f"Config file: {manager.config_path}")


# ============================================================================
# Root Commands
# ============================================================================

@app.command("version")
def version_cmd():
    """Show hostprobe version."""
    from hostprobe_core import __version__
    console.print(f"hostprobe v{__version__}")


def main():
    """Main entry point."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[dim]Interrupted[/dim]")
        sys.exit(0)


if __name__ == "__main__":
    main()

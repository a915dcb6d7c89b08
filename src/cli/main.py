"""Main CLI entry point for the confluence-mcp command.

This module provides the Typer application that loads the Confluence
connection settings, builds the gateway and MCP server, and serves the
tools over the selected transport.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from src.cli.models import ExitCode, Transport
from src.confluence_client.config import load_settings
from src.confluence_client.errors import ConfigurationError
from src.confluence_client.gateway import ContentGateway
from src.tools.registry import SERVER_NAME, create_server

__version__ = "1.0.0"

app = typer.Typer(
    name="confluence-mcp",
    help="MCP server exposing Confluence Data Center content, comments, labels and attachments.",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=False,
)

logger = logging.getLogger(__name__)

# stdout belongs to the stdio transport
console = Console(stderr=True, highlight=False)


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'src' namespace logger so third-party libraries keep
    their own settings. All output goes to stderr.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    app_logger = logging.getLogger("src")
    app_logger.setLevel(level)

    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter("%(asctime)s [%(levelname)8s] %(message)s", datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"confluence-mcp_{timestamp}.log"

        file_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt=date_format,
        )
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


@app.command()
def main_command(
    transport: Transport = typer.Option(
        Transport.STDIO,
        "--transport",
        "-t",
        help="MCP transport to serve on",
        case_sensitive=False,
    ),
    host: str = typer.Option(
        "127.0.0.1",
        "--host",
        help="Bind address for the http and sse transports",
    ),
    port: int = typer.Option(
        8000,
        "--port",
        help="Port for the http and sse transports",
    ),
    env_file: Optional[str] = typer.Option(
        None,
        "--env-file",
        help="Path to a .env file with CONFLUENCE_* settings",
        metavar="PATH",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=warnings, 1=info, 2=debug",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
    ),
) -> None:
    """Serve Confluence Data Center tools over MCP.

    \b
    CONFIGURATION (environment or .env file):
      CONFLUENCE_API_TOKEN       Personal access token (required)
      CONFLUENCE_HOST            Hostname, e.g. confluence.example.com
      CONFLUENCE_API_BASE_PATH   Full base URL, overrides CONFLUENCE_HOST

    \b
    EXAMPLES:
      confluence-mcp                                  # stdio transport
      confluence-mcp --transport http --port 9000     # streamable HTTP
    """
    if version:
        typer.echo(f"confluence-mcp version {__version__}")
        raise typer.Exit()

    _configure_logging(verbosity, logdir)

    try:
        settings = load_settings(env_file)
        gateway = ContentGateway.from_settings(settings)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(ExitCode.CONFIG_ERROR)

    server = create_server(gateway)
    logger.info(f"Starting {SERVER_NAME} for {gateway.base_url} ({transport.value})")

    try:
        if transport == Transport.STDIO:
            server.run()
        else:
            server.run(transport=transport.value, host=host, port=port)
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except Exception as e:
        logger.exception("Server failed")
        console.print(f"[red]✗[/red] Server failed: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    raise typer.Exit(ExitCode.SUCCESS)


def main() -> None:
    """Main entry point for the CLI application.

    This function is called when the module is executed directly or
    when the console script is invoked.
    """
    app()


# Allow running as: python -m src.cli.main
if __name__ == "__main__":
    main()

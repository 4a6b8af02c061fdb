"""CLI entry point for Trassen Explorer."""

import argparse
import asyncio
import sys
from typing import List, Optional

from .config import settings
from .services.error_mapper import map_exception
from .services.infrastructure_client import ApiClientError, InfrastructureClient
from .services.schemas import InfrastructureSummary
from .tui.console import console
from .tui.logging import configure_event_logging, log_tui_event


def fetch_summaries(client: InfrastructureClient) -> List[InfrastructureSummary]:
    """Load the picker entries before the terminal switches to the TUI."""
    return asyncio.run(client.list_infrastructures())


def run_tui(client: InfrastructureClient, summaries: List[InfrastructureSummary]) -> None:
    """Run the Textual explorer."""
    from .tui.textual_app import ExplorerApp

    ExplorerApp(source=client, summaries=summaries).run()


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Trassenfinder Infrastructure Explorer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Keys:
  up/down (k/j)  move the selection
  enter          open the selected infrastructure
  b / s          switch to the station / segment list
  escape         back to the infrastructure list
  q              quit
        """,
    )
    parser.add_argument(
        "-a",
        "--api-url",
        default=settings.api.base_url,
        help="Infrastructure index URL (default: %(default)s)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.api.timeout,
        help="HTTP timeout in seconds (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=settings.logging.level,
        help="Event log level (default: %(default)s)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Shortcut for --log-level DEBUG",
    )
    args = parser.parse_args(argv)

    configure_event_logging(level="DEBUG" if args.verbose else args.log_level)
    client = InfrastructureClient(base_url=args.api_url, timeout=args.timeout)

    try:
        summaries = fetch_summaries(client)
    except ApiClientError as e:
        mapped = map_exception(e)
        log_tui_event("startup_failed", code=mapped.code, message=mapped.message)
        console.print(f"[bold red]Error:[/bold red] {mapped.message}")
        if mapped.hint:
            console.print(f"[dim]{mapped.hint}[/dim]")
        sys.exit(1)

    run_tui(client, summaries)


if __name__ == "__main__":
    main()

"""Interactive console front-end for the route planner.

Loads a routes CSV, then loops over a numbered menu until the user
exits or input ends. All rendering goes through the configured
ResultRendererPort; the service never prints.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence, TextIO

from .config import ObservabilityConfig, get_config
from .container import Container
from .domain.errors import EmptyGraphError, GraphError
from .domain.models import QueryKind
from .ports.rendering import ResultRendererPort
from .services import RoutePlannerService

MENU = (
    "\n1. Print Network\n"
    "2. Shortest Path (Dijkstra)\n"
    "3. Min Transfers (BFS)\n"
    "4. MST (Prim)\n"
    "0. Exit\n"
    "Choice: "
)


def configure_logging(config: ObservabilityConfig) -> None:
    logging.basicConfig(level=config.level, format=config.format)


def _prompt(text: str, stdin: TextIO, stdout: TextIO) -> Optional[str]:
    """Print ``text`` and read one line; None once input is exhausted."""
    print(text, end="", file=stdout, flush=True)
    line = stdin.readline()
    if not line:
        return None
    return line.strip()


def _run_path_query(
    planner: RoutePlannerService,
    renderer: ResultRendererPort,
    kind: QueryKind,
    stdin: TextIO,
    stdout: TextIO,
) -> bool:
    start = _prompt("Start: ", stdin, stdout)
    if start is None:
        return False
    end = _prompt("End: ", stdin, stdout)
    if end is None:
        return False

    result, error = planner.query_safe(kind, start, end)
    if error is not None:
        print(error, file=stdout)
    elif result is not None:
        print(renderer.render_path(result), file=stdout)
    return True


def run_menu(
    planner: RoutePlannerService,
    renderer: ResultRendererPort,
    stdin: TextIO,
    stdout: TextIO,
) -> None:
    """Serve menu commands until the user picks 0 or input ends."""
    while True:
        choice = _prompt(MENU, stdin, stdout)
        if choice is None:
            print("", file=stdout)
            return

        if choice == "1":
            print(renderer.render_network(planner.network_dump()), file=stdout)
        elif choice == "2":
            if not _run_path_query(
                planner, renderer, QueryKind.SHORTEST_PATH, stdin, stdout
            ):
                return
        elif choice == "3":
            if not _run_path_query(
                planner, renderer, QueryKind.MIN_TRANSFERS, stdin, stdout
            ):
                return
        elif choice == "4":
            try:
                tree = planner.spanning_tree()
            except EmptyGraphError as e:
                print(f"{e.message}.", file=stdout)
            else:
                print(renderer.render_spanning_tree(tree), file=stdout)
        elif choice == "0":
            print("Goodbye.", file=stdout)
            return
        else:
            print("Invalid choice.", file=stdout)


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    container: Optional[Container] = None,
) -> int:
    """Load routes and run the interactive menu.

    The CSV filename is taken from the first argument, else prompted
    for; an empty answer falls back to the configured routes file.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    config = container.config if container is not None else get_config()
    configure_logging(config.observability)
    container = container or Container.create_default(config)

    planner: RoutePlannerService = container.resolve(RoutePlannerService)
    renderer: ResultRendererPort = container.resolve(ResultRendererPort)

    if args:
        filename: Optional[str] = args[0]
    else:
        filename = _prompt(
            f"Enter CSV filename (default: {config.graph.routes_path}): ",
            stdin,
            stdout,
        )

    try:
        report = planner.load_routes(filename or None)
    except GraphError as e:
        print(f"Error: {e.message}", file=stdout)
    else:
        print(renderer.render_load_report(report), file=stdout)

    run_menu(planner, renderer, stdin, stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Wiring of ports to adapters for the route planner.

Each port is bound to a factory; the first ``resolve`` builds the
adapter and later calls reuse it, so the CLI and the planner share one
loader, one set of solvers and one renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Port-to-adapter bindings built from an AppConfig.

    Usage:
        container = Container.create_default()
        planner = container.resolve(RoutePlannerService)

        # Swap an adapter before anything resolves it
        container.register(RouteLoaderPort, lambda: FakeLoader())
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _instances: Dict[type[Any], Any] = field(default_factory=dict, repr=False)

    def register(self, port_type: type[Any], factory: Callable[[], Any]) -> None:
        """Bind ``port_type`` to ``factory``, dropping any instance already built."""
        self._factories[port_type] = factory
        self._instances.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Return the adapter bound to ``port_type``, building it once.

        Raises:
            KeyError: If nothing is bound to the type.
        """
        if port_type not in self._instances:
            try:
                factory = self._factories[port_type]
            except KeyError:
                raise KeyError(f"Type not registered: {port_type}") from None
            self._instances[port_type] = factory()
        return self._instances[port_type]

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Bind the CSV loader, the three solvers and the text renderer."""
        from .adapters.graph import (
            BFSRouteSolver,
            CSVRouteLoader,
            DijkstraRouteSolver,
            PrimSpanningTreeSolver,
        )
        from .adapters.rendering import TextRenderer
        from .ports.graph import RouteLoaderPort, SpanningTreeSolverPort
        from .ports.rendering import ResultRendererPort
        from .services import RoutePlannerService

        config = config or get_config()
        container = cls(config=config)

        container.register(RouteLoaderPort, lambda: CSVRouteLoader(config.graph))
        container.register(DijkstraRouteSolver, DijkstraRouteSolver)
        container.register(BFSRouteSolver, BFSRouteSolver)
        container.register(SpanningTreeSolverPort, PrimSpanningTreeSolver)
        container.register(ResultRendererPort, TextRenderer)
        container.register(
            RoutePlannerService,
            lambda: RoutePlannerService(
                loader=container.resolve(RouteLoaderPort),
                path_solver=container.resolve(DijkstraRouteSolver),
                transfer_solver=container.resolve(BFSRouteSolver),
                tree_solver=container.resolve(SpanningTreeSolverPort),
            ),
        )

        return container

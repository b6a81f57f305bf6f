"""Dependency wiring for the navigation service.

The API and the CLI both obtain their ``RouteService`` from a container
built by ``Container.create_default``. Tests build a bare ``Container``
and register fakes against the port types instead.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Maps port types to factories.

    Factories registered as singletons run once per container; the
    instance is cached until the type is registered again.

    Attributes:
        config: Configuration the default bindings are built from
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _instances: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _shared: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Bind ``port_type`` to ``factory``, replacing any earlier binding."""
        with self._lock:
            self._factories[port_type] = factory
            self._instances.pop(port_type, None)
            if singleton:
                self._shared.add(port_type)
            else:
                self._shared.discard(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Return an instance for ``port_type``.

        Raises:
            KeyError: If nothing is registered for the type.
        """
        with self._lock:
            try:
                factory = self._factories[port_type]
            except KeyError:
                raise KeyError(f"Type not registered: {port_type}") from None

            if port_type not in self._shared:
                return factory()
            if port_type not in self._instances:
                self._instances[port_type] = factory()
            return self._instances[port_type]

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Wire the JSON layout repository, the router and the route service.

        Args:
            config: Configuration override; the cached environment
                configuration is used when omitted.
        """
        from .adapters.layout import JSONLayoutRepository
        from .graph import DijkstraRouter, GraphBuilder
        from .ports.graph import LayoutRepositoryPort, RouteSolverPort
        from .services import RouteService

        config = config or get_config()
        container = cls(config=config)

        container.register(GraphBuilder, GraphBuilder)
        container.register(
            LayoutRepositoryPort,
            lambda: JSONLayoutRepository(
                config=config.layout,
                builder=container.resolve(GraphBuilder),
            ),
        )
        container.register(RouteSolverPort, DijkstraRouter)
        container.register(
            RouteService,
            lambda: RouteService(
                repository=container.resolve(LayoutRepositoryPort),
                router=container.resolve(RouteSolverPort),
                default_profile=config.routing.default_profile,
            ),
        )
        return container

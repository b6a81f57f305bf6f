"""FastAPI routes for terminal navigation.

Endpoints:
- ``GET /health``
- ``GET /api/route?from=<id>&to=<id>&profile=<name>``
- ``GET /api/nodes``
- ``GET /api/profiles``

Invalid queries (unknown or disabled node, unknown profile) map to 400 and
inaccessible destinations to 404. A layout that fails to load or validate
(``ConfigError``) maps to 500 rather than a client error: the layout is
server-side state, and no change to the request can fix it.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Query

from .config import AppConfig, get_config
from .domain.errors import ConfigError, InvalidQueryError, NoRouteError
from .domain.models import RouteResult
from .services import RouteService


def _route_payload(
    service: RouteService, result: RouteResult, decimals: int
) -> dict[str, Any]:
    description = service.describe(result)
    return {
        "from": result.source,
        "to": result.target,
        "path": list(result.path),
        "cost": round(result.total_cost, decimals),
        "profile": result.profile.key if result.profile else None,
        "floor_changes": [
            {"from_floor": c.from_floor, "to_floor": c.to_floor, "at": c.at_node}
            for c in description.floor_changes
        ],
    }


def create_app(
    service: Optional[RouteService] = None,
    config: Optional[AppConfig] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        service: Route service to serve, resolved from the default
            container when omitted.
        config: Application configuration override.
    """
    config = config or get_config()
    if service is None:
        from .container import Container

        service = Container.create_default(config).resolve(RouteService)

    app = FastAPI(title="Terminal Navigation API", version="1.0.0")

    @app.get("/health")
    def health() -> dict[str, Any]:
        return {"status": "ok"}

    @app.get("/api/route")
    def route(
        source: str = Query(..., alias="from"),
        target: str = Query(..., alias="to"),
        profile: Optional[str] = Query(None),
    ) -> dict[str, Any]:
        """Compute the shortest route for a traveler profile."""
        try:
            result = service.route(source, target, profile)
            return _route_payload(service, result, config.api.cost_decimals)
        except InvalidQueryError as exc:
            raise HTTPException(status_code=400, detail=exc.message) from exc
        except NoRouteError as exc:
            raise HTTPException(status_code=404, detail=exc.message) from exc
        except ConfigError as exc:
            raise HTTPException(status_code=500, detail=f"Layout unavailable: {exc}") from exc

    @app.get("/api/nodes")
    def nodes() -> dict[str, Any]:
        """List the layout's nodes with their display metadata."""
        try:
            graph = service.repository.load()
        except ConfigError as exc:
            raise HTTPException(status_code=500, detail=f"Layout unavailable: {exc}") from exc
        return {
            "nodes": [
                {
                    "id": node.id,
                    "label": node.label,
                    "description": node.description,
                    "floor": graph.floor_of(node.id),
                    "enabled": graph.is_enabled(node.id),
                }
                for node in service.list_nodes()
            ]
        }

    @app.get("/api/profiles")
    def profiles() -> dict[str, Any]:
        """List traveler profiles."""
        return {
            "profiles": [
                {"name": p.key, "description": p.description}
                for p in service.list_profiles()
            ]
        }

    return app

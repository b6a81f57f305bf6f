"""Services layer - Application orchestration.

Available services:
- RouteService: Computes, compares and describes routes
"""

from .route_service import ProfileOutcome, RouteService

__all__ = ["RouteService", "ProfileOutcome"]

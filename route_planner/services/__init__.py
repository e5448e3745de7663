"""Services layer - Application orchestration.

Available services:
- RoutePlannerService: Loads routes and answers routing queries
"""

from .planner import RoutePlannerService

__all__ = ["RoutePlannerService"]

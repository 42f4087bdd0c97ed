"""Infrastructure layer - output formatting."""

from .formatters import JsonPlanExporter, PlanFormatter

__all__ = ["JsonPlanExporter", "PlanFormatter"]

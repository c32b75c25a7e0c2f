"""Core business logic layer.

Subpackages:
- shopping: merging selected recipes into a categorized shopping list
- reporting: rating averages and favorites for the dashboard
"""
__all__ = ["shopping", "reporting"]

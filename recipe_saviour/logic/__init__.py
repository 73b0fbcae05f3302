"""Core business logic layer.

Subpackages:
- extraction: recipe extraction from HTML pages
- ingredients: grouping keys and quantity parsing for ingredient lines
- shopping: building shopping lists
- planning: choosing meal plans with shared ingredients
- sharing: plain-text share payloads
"""
__all__ = ["extraction", "ingredients", "shopping", "planning", "sharing"]

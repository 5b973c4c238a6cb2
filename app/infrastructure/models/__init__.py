"""Shared Pydantic model configuration.

Exports:
    ContentModel: Frozen camelCase-aliased base for authored site content
"""

from infrastructure.models.base import ContentModel

__all__ = ["ContentModel"]

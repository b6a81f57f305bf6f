"""Layout adapters - Implementations of LayoutRepositoryPort.

Available implementations:
- JSONLayoutRepository: Loads the layout from a JSON file
"""

from .json_repository import JSONLayoutRepository, parse_layout

__all__ = ["JSONLayoutRepository", "parse_layout"]

"""Infrastructure layer for the SxS manifest generator.

This layer contains adapters for external systems and I/O operations.
It implements the ports defined in the application layer.
"""

__all__ = []

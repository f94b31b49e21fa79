"""Authority client interfaces."""

from .protocols import DataCoordClient, RootCoordClient

__all__ = ["DataCoordClient", "RootCoordClient"]

from .base import RealmDataSource
from .gno import GnoDataSource

__all__ = ["RealmDataSource", "GnoDataSource"]

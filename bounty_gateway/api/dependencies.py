"""FastAPI dependencies for dependency injection."""

from bounty_gateway.datasources import RealmDataSource

# Global datasource instance - initialized at app startup
_datasource: RealmDataSource | None = None


def set_datasource(datasource: RealmDataSource) -> None:
    """Set the global datasource instance."""
    global _datasource
    _datasource = datasource


def get_datasource() -> RealmDataSource:
    """Get the global datasource instance for dependency injection."""
    if _datasource is None:
        raise RuntimeError("RealmDataSource not initialized. Call set_datasource() first.")
    return _datasource

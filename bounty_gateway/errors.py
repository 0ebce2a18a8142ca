"""Gateway error types mapped to HTTP responses in the app factory."""


class GatewayError(Exception):
    """Base class for errors surfaced to API clients."""
    status_code = 500


class RealmTransportError(GatewayError):
    """The remote realm query failed outright."""
    status_code = 500


class NotFoundError(GatewayError):
    """A single-entity query returned the nil sentinel."""
    status_code = 404

"""Application configuration."""

import os
from dataclasses import dataclass


@dataclass
class Config:
    """Application configuration loaded from environment variables."""

    # API settings
    host: str = "0.0.0.0"
    port: int = 8080

    # Gno.land RPC node and the realm to query
    gno_rpc_url: str = "https://rpc.gno.land:443"
    realm_path: str = "gno.land/r/greg007/gnobounty_v2"

    # Per-request timeout for realm queries, in seconds
    request_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8080")),
            gno_rpc_url=os.getenv("GNO_RPC_URL", "https://rpc.gno.land:443"),
            realm_path=os.getenv(
                "GNO_REALM_PATH",
                "gno.land/r/greg007/gnobounty_v2"
            ),
            request_timeout=float(os.getenv("GNO_REQUEST_TIMEOUT", "30")),
        )

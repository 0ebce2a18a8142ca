"""Gno.land RPC data source implementation."""

import asyncio
import base64
import itertools
import logging
from typing import Optional

import httpx

from bounty_gateway.errors import RealmTransportError
from .base import RealmDataSource

logger = logging.getLogger(__name__)

# RPC constants
DEFAULT_RPC_URL = "https://rpc.gno.land:443"
DEFAULT_REALM_PATH = "gno.land/r/greg007/gnobounty_v2"
QEVAL_PATH = "vm/qeval"
REQUEST_TIMEOUT = 30.0
MAX_RETRIES = 1
RETRY_DELAY = 0.5


class GnoDataSource(RealmDataSource):
    """
    Data source evaluating realm expressions through a Gno.land RPC node.

    Each evaluation is one `abci_query` JSON-RPC call on the `vm/qeval` path,
    with `<realm path>.<expression>` as query data.

    Limitations:
    - Read-only, no transactions
    - One retry on timeouts and connection errors, none on other failures
    """

    def __init__(
        self,
        rpc_url: str = DEFAULT_RPC_URL,
        realm_path: str = DEFAULT_REALM_PATH,
        timeout: float = REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Gno data source.

        Args:
            rpc_url: Base URL of the RPC node
            realm_path: Package path of the realm to query
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport, used by tests
        """
        self.rpc_url = rpc_url
        self.realm_path = realm_path
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._ids = itertools.count(1)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.rpc_url,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def _make_request(self, payload: dict, retry_count: int = 0) -> dict:
        """
        Post a JSON-RPC request with timeout handling and a single retry.

        Args:
            payload: JSON-RPC request body
            retry_count: Current retry attempt

        Returns:
            Response JSON data
        """
        client = await self._get_client()

        try:
            response = await client.post("/", json=payload, timeout=self.timeout)
            response.raise_for_status()
            return response.json()

        except (httpx.TimeoutException, httpx.ConnectError) as e:
            if retry_count < MAX_RETRIES:
                logger.warning(
                    f"RPC request to {self.rpc_url} failed: {e!r} "
                    f"(attempt {retry_count + 1}/{MAX_RETRIES + 1}). Retrying in {RETRY_DELAY}s..."
                )
                await asyncio.sleep(RETRY_DELAY)
                return await self._make_request(payload, retry_count + 1)
            logger.error(f"RPC request to {self.rpc_url} failed after {MAX_RETRIES} retries: {e!r}")
            raise RealmTransportError(f"rpc request failed: {e!r}") from e

        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error {e.response.status_code} from {self.rpc_url}: {e}")
            raise RealmTransportError(f"rpc returned HTTP {e.response.status_code}") from e

        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Unexpected error from {self.rpc_url}: {e!r}")
            raise RealmTransportError(f"rpc request failed: {e!r}") from e

    async def evaluate(self, expression: str) -> str:
        """Evaluate `expression` in the realm and return the value text."""
        query = f"{self.realm_path}.{expression}"
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": "abci_query",
            "params": {
                "path": QEVAL_PATH,
                "data": base64.b64encode(query.encode()).decode(),
            },
        }

        data = await self._make_request(payload)

        if data.get("error"):
            err = data["error"]
            message = (err.get("data") or err.get("message")) if isinstance(err, dict) else err
            raise RealmTransportError(f"{expression}: {message}")

        base = (
            (data.get("result") or {})
            .get("response", {})
            .get("ResponseBase", {})
        )
        if base.get("Error"):
            raise RealmTransportError(f"{expression}: {base.get('Log') or base['Error']}")

        raw = base.get("Data") or ""
        try:
            return base64.b64decode(raw).decode("utf-8")
        except ValueError as e:
            raise RealmTransportError(f"{expression}: undecodable response data") from e

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

import httpx

from core.config import Settings
from core.errors import UpstreamError
from helpers import http_client


class BlockscoutClient:
    """Token-transfer lookups on the Base block indexer."""

    def __init__(self, cfg: Settings) -> None:
        self.base = cfg.BLOCKSCOUT_BASE_URL.rstrip("/")
        self.cfg = cfg
        self.headers = {"Accept": "application/json"}

    async def token_transfers(self, tx_hash: str) -> list[dict]:
        """
        GET /api/v2/transactions/{hash}/token-transfers
        Returns the `items` list (possibly empty).
        """
        url = f"{self.base}/api/v2/transactions/{tx_hash}/token-transfers"
        try:
            async with http_client(self.cfg) as client:
                r = await client.get(url, headers=self.headers)
                r.raise_for_status()
                body = r.json()
        except httpx.HTTPError as e:
            raise UpstreamError(f"Blockscout lookup failed: {e}") from e

        return (body or {}).get("items") or []

import httpx

from core.config import Settings
from core.errors import DataError, UpstreamError
from helpers import http_client


class LedgerClient:
    """Etherscan v2 account queries."""

    def __init__(self, cfg: Settings) -> None:
        self.url = cfg.ETHERSCAN_BASE_URL
        self.cfg = cfg

    async def list_transactions(self, address: str) -> list[dict]:
        """
        Most recent normal transactions, newest first (one page).
        Etherscan answers with a string in `result` for bad addresses / errors.
        """
        params = {
            "module": "account",
            "action": "txlist",
            "address": address,
            "startblock": 0,
            "endblock": 99999999,
            "page": 1,
            "offset": self.cfg.TX_PAGE_SIZE,
            "sort": "desc",
            "apikey": self.cfg.ETHERSCAN_API_KEY,
            "chainid": self.cfg.ETHERSCAN_CHAIN_ID,
        }
        try:
            async with http_client(self.cfg) as client:
                r = await client.get(self.url, params=params)
                r.raise_for_status()
                body = r.json()
        except httpx.HTTPError as e:
            raise UpstreamError(f"Etherscan txlist failed: {e}") from e

        result = body.get("result") if isinstance(body, dict) else None
        if not isinstance(result, list):
            raise DataError("Invalid wallet address or no transactions found")
        return result

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional

import httpx

from core.config import Settings


# ---------------------------
# Outbound HTTP
# ---------------------------

def http_client(cfg: Settings) -> httpx.AsyncClient:
    """
    One short-lived client per collaborator call.
    Timeout and connection retries come from settings, never library defaults.
    """
    timeout = httpx.Timeout(cfg.HTTP_TIMEOUT_SECONDS, connect=min(5.0, cfg.HTTP_TIMEOUT_SECONDS))
    transport = httpx.AsyncHTTPTransport(retries=max(0, cfg.HTTP_RETRIES))
    return httpx.AsyncClient(timeout=timeout, transport=transport, follow_redirects=True)


# ---------------------------
# Token amounts
# ---------------------------

def units_to_amount(value: int, decimals: int) -> str:
    """
    Smallest-unit integer -> decimal string with 4 places.
    9000 @ 6 decimals -> "0.0090"
    """
    scaled = Decimal(value) / (Decimal(10) ** decimals)
    return str(scaled.quantize(Decimal("0.0001"), rounding=ROUND_HALF_UP))


def same_address(a: Optional[Any], b: Optional[Any]) -> bool:
    """Case-insensitive hex address compare; missing never matches."""
    if not a or not b:
        return False
    return str(a).strip().lower() == str(b).strip().lower()

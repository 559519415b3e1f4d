import logging
import re
from typing import Any, Dict, Optional

from fastapi import Request

from core.config import Settings
from helpers import same_address, units_to_amount
from schemas.scan import PaymentVerification, ScanRequest
from services.blockscout_client import BlockscoutClient

log = logging.getLogger("payment")

TX_HASH_RE = re.compile(r"0x[0-9a-fA-F]{64}")


class PaymentVerifier:
    """
    Confirms a USDC transfer of at least MINIMUM_PAYMENT_UNITS to our wallet.
    verify() NEVER raises: every failure becomes valid=False + reason.
    """

    def __init__(self, cfg: Settings, explorer: Optional[BlockscoutClient] = None) -> None:
        self.cfg = cfg
        self.explorer = explorer or BlockscoutClient(cfg)

    async def verify(self, tx_hash: str) -> PaymentVerification:
        # the hash becomes part of the explorer URL path
        if not TX_HASH_RE.fullmatch(tx_hash or ""):
            return PaymentVerification(
                valid=False,
                reason="Invalid transaction hash. Expected 0x followed by 64 hex characters.",
            )

        try:
            transfers = await self.explorer.token_transfers(tx_hash)

            if not transfers:
                return PaymentVerification(valid=False, reason="Transaction not found on Base network.")

            match = self._find_transfer(transfers)
            if match is None:
                return PaymentVerification(
                    valid=False,
                    reason=(
                        "No USDC payment found to scanner wallet. "
                        f"Send USDC on Base to: {self.cfg.WALLET_ADDRESS}"
                    ),
                )

            value = int((match.get("total") or {}).get("value"))
            decimals = self.cfg.TOKEN_DECIMALS
            if value < self.cfg.MINIMUM_PAYMENT_UNITS:
                return PaymentVerification(
                    valid=False,
                    reason=f"Payment too low. Need $0.01 USDC. Found: ${units_to_amount(value, decimals)}",
                )

            payer = (match.get("from") or {}).get("hash")
            if not payer:
                raise ValueError("transfer record has no sender")

            return PaymentVerification(
                valid=True,
                payer=payer,
                amount=units_to_amount(value, decimals),
            )

        except Exception as e:
            log.warning("Payment verification error for %s: %s", tx_hash, e)
            return PaymentVerification(valid=False, reason=f"Could not verify payment: {e}")

    def _find_transfer(self, transfers: list[dict]) -> Optional[dict]:
        for t in transfers:
            token = (t.get("token") or {}).get("address_hash")
            to = (t.get("to") or {}).get("hash")
            if same_address(token, self.cfg.USDC_CONTRACT) and same_address(to, self.cfg.receiver):
                return t
        return None

    def instructions(self) -> Dict[str, Any]:
        """What a caller needs to pay and resubmit."""
        if self.cfg.PAYMENT_PROOF_SOURCE == "header":
            how = f"resend the request with your transaction hash in the {self.cfg.PAYMENT_HEADER_NAME} header"
        else:
            how = "resubmit with your transaction hash"

        return {
            "price": self.cfg.PRICE_LABEL,
            "network": self.cfg.NETWORK_LABEL,
            "payTo": self.cfg.WALLET_ADDRESS,
            "instructions": f"Send {self.cfg.PRICE_LABEL} on {self.cfg.NETWORK_LABEL} network then {how}",
        }


# -------------------------
# Payment proof sources
# -------------------------

class ProofSource:
    """Where the payment reference travels in a scan request."""

    gated = True

    def extract(self, request: Request, body: ScanRequest) -> Optional[str]:
        raise NotImplementedError


class BodyProofSource(ProofSource):
    def extract(self, request: Request, body: ScanRequest) -> Optional[str]:
        return (body.txHash or "").strip() or None


class HeaderProofSource(ProofSource):
    def __init__(self, header_name: str) -> None:
        self.header_name = header_name

    def extract(self, request: Request, body: ScanRequest) -> Optional[str]:
        return (request.headers.get(self.header_name) or "").strip() or None


class DisabledProofSource(ProofSource):
    gated = False

    def extract(self, request: Request, body: ScanRequest) -> Optional[str]:
        return None


def proof_source_from_settings(cfg: Settings) -> ProofSource:
    if cfg.PAYMENT_PROOF_SOURCE == "header":
        return HeaderProofSource(cfg.PAYMENT_HEADER_NAME)
    if cfg.PAYMENT_PROOF_SOURCE == "disabled":
        return DisabledProofSource()
    return BodyProofSource()

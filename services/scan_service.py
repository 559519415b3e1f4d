import logging
from typing import Any, Dict, Optional

from core.config import Settings
from core.errors import PaymentError, ValidationError
from schemas.scan import RiskReport
from services.payment import PaymentVerifier, ProofSource, proof_source_from_settings
from services.scanner import WalletScanner

log = logging.getLogger("scan")


class ScanService:
    """
    One scan request:
      NEED_ADDRESS -> NEED_PAYMENT -> VERIFYING -> SCANNING -> DONE | FAILED

    Built once at startup from the (frozen) settings.
    """

    def __init__(
        self,
        cfg: Settings,
        *,
        verifier: Optional[PaymentVerifier] = None,
        scanner: Optional[WalletScanner] = None,
        proof_source: Optional[ProofSource] = None,
    ) -> None:
        self.cfg = cfg
        self.verifier = verifier or PaymentVerifier(cfg)
        self.scanner = scanner or WalletScanner(cfg)
        self.proof_source = proof_source or proof_source_from_settings(cfg)

    @classmethod
    def from_settings(cls, cfg: Settings) -> "ScanService":
        return cls(cfg)

    async def run(self, address: Optional[str], proof: Optional[str]) -> Dict[str, Any]:
        address = (address or "").strip()
        if not address:
            raise ValidationError("Wallet address required")

        payment = None
        if self.proof_source.gated:
            if not proof:
                raise PaymentError("Payment Required", instructions=self.verifier.instructions())

            payment = await self.verifier.verify(proof)
            if not payment.valid:
                log.info("Payment rejected for %s: %s", proof, payment.reason)
                raise PaymentError(
                    "Payment verification failed",
                    instructions=self.verifier.instructions(),
                    reason=payment.reason,
                )
            log.info("Payment verified: tx=%s from=%s amount=%s", proof, payment.payer, payment.amount)

        result = await self.scanner.analyze_wallet(address)

        if isinstance(result, RiskReport):
            out = result.to_json()
        else:
            out = dict(result)

        if payment is not None:
            out.update(
                {
                    "paymentVerified": True,
                    "paidBy": payment.payer,
                    "amountPaid": payment.amount,
                }
            )
        return out

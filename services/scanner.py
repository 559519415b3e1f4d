from typing import Any, Dict, Optional

from core.config import Settings
from core.errors import DataError
from core.logger import log
from schemas.scan import RiskReport
from services.ai_explainer import AIExplainClient
from services.ledger_client import LedgerClient
from services.risk_engine import compute_risk


class WalletScanner:
    """
    history fetch -> rule-based score -> AI prose.
    Upstream errors propagate; the controller turns them into a 500.
    """

    def __init__(
        self,
        cfg: Settings,
        ledger: Optional[LedgerClient] = None,
        explainer: Optional[AIExplainClient] = None,
    ) -> None:
        self.ledger = ledger or LedgerClient(cfg)
        self.explainer = explainer or AIExplainClient(cfg)

    async def analyze_wallet(self, address: str) -> RiskReport | Dict[str, Any]:
        """
        Returns a RiskReport, or {"error": ...} when the explorer had no usable data.
        """
        try:
            transactions = await self.ledger.list_transactions(address)
        except DataError as e:
            log.info("No usable history for %s: %s", address, e.message)
            return e.payload()

        risk = compute_risk(transactions)
        log.info(
            "Scored %s: score=%s level=%s flags=%s",
            address,
            risk["risk_score"],
            risk["risk_level"],
            len(risk["flags"]),
        )

        explanation = await self.explainer.explain(address=address, risk=risk)

        return RiskReport(address=address, ai_explanation=explanation, **risk)

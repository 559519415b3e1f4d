from typing import Any, Dict

from openai import AsyncOpenAI

from core.config import Settings

GROQ_BASE_URL = "https://api.groq.com/openai/v1"


class AIExplainClient:
    """
    LLM prose explanation for an already computed risk result.
    The text is opaque: nothing here parses or validates it.

    Unlike the score itself, a failed call is NOT swallowed:
    the scan fails with the provider's message.
    """

    def __init__(self, cfg: Settings) -> None:
        self.cfg = cfg

        if not cfg.ai_active:
            self.enabled = False
            self.client = None
            return

        self.enabled = True
        if cfg.AI_PROVIDER == "groq":
            self.client = AsyncOpenAI(
                api_key=cfg.GROQ_API_KEY,
                base_url=GROQ_BASE_URL,
                timeout=cfg.AI_TIMEOUT_SECONDS,
                max_retries=cfg.AI_MAX_RETRIES,
            )
        else:
            self.client = AsyncOpenAI(
                api_key=cfg.OPENAI_API_KEY,
                timeout=cfg.AI_TIMEOUT_SECONDS,
                max_retries=cfg.AI_MAX_RETRIES,
            )
        self.model = cfg.AI_MODEL

    async def explain(self, *, address: str, risk: Dict[str, Any]) -> str:
        if not self.enabled:
            return self._offline_summary(risk)

        resp = await self.client.chat.completions.create(
            model=self.model,
            max_tokens=self.cfg.AI_MAX_TOKENS,
            messages=[{"role": "user", "content": self._build_prompt(address=address, risk=risk)}],
        )
        return resp.choices[0].message.content or ""

    # -------------------------
    # Helpers
    # -------------------------

    def _build_prompt(self, *, address: str, risk: Dict[str, Any]) -> str:
        flags = risk.get("flags") or []
        return (
            "You are a blockchain security expert. Analyze this wallet and give a 3-4 sentence plain English explanation.\n"
            f"Wallet: {address}\n"
            f"Risk Score: {risk['risk_score']}/100\n"
            f"Risk Level: {risk['risk_level']}\n"
            f"Total Transactions: {risk['total_transactions']}\n"
            f"Failed Transactions: {risk['failed_transactions']}\n"
            f"Unique Contracts: {risk['unique_contracts']}\n"
            f"Flags: {', '.join(flags) if flags else 'None'}"
        )

    def _offline_summary(self, risk: Dict[str, Any]) -> str:
        flags = risk.get("flags") or []
        summary = f"Rule-based assessment: {risk['risk_level']} risk ({risk['risk_score']}/100)."
        if flags:
            summary += " Triggered: " + "; ".join(flags) + "."
        return summary + " AI explanation disabled."

import unittest
from types import SimpleNamespace
from unittest.mock import AsyncMock

from core.config import Settings
from services.ai_explainer import GROQ_BASE_URL, AIExplainClient

RISK = {
    "risk_score": 45,
    "risk_level": "MEDIUM",
    "flags": ["No transaction history", "Interacts with many contracts: 51"],
    "total_transactions": 0,
    "failed_transactions": 0,
    "unique_contracts": 51,
}


def _settings(**overrides) -> Settings:
    values = {
        "WALLET_ADDRESS": "0xAbC0000000000000000000000000000000000001",
        "ETHERSCAN_API_KEY": "test-key",
        "AI_ENABLED": False,
    }
    values.update(overrides)
    return Settings(**values)


class TestAIExplainClient(unittest.IsolatedAsyncioTestCase):
    def test_prompt_carries_score_counts_and_flags(self):
        prompt = AIExplainClient(_settings())._build_prompt(address="0xwallet", risk=RISK)

        self.assertIn("Wallet: 0xwallet", prompt)
        self.assertIn("Risk Score: 45/100", prompt)
        self.assertIn("Risk Level: MEDIUM", prompt)
        self.assertIn("Unique Contracts: 51", prompt)
        self.assertIn("Flags: No transaction history, Interacts with many contracts: 51", prompt)

    def test_prompt_without_flags_says_none(self):
        risk = dict(RISK, flags=[])
        prompt = AIExplainClient(_settings())._build_prompt(address="0xwallet", risk=risk)
        self.assertIn("Flags: None", prompt)

    async def test_disabled_client_returns_rule_summary(self):
        text = await AIExplainClient(_settings()).explain(address="0xwallet", risk=RISK)

        self.assertIn("MEDIUM risk (45/100)", text)
        self.assertIn("AI explanation disabled", text)

    async def test_groq_client_uses_budget_and_returns_text(self):
        ai = AIExplainClient(_settings(AI_ENABLED=True, AI_PROVIDER="groq", GROQ_API_KEY="gsk-test"))
        self.assertTrue(ai.enabled)
        self.assertEqual(str(ai.client.base_url).rstrip("/"), GROQ_BASE_URL)

        reply = SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content="Risky."))])
        create = AsyncMock(return_value=reply)
        ai.client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))

        text = await ai.explain(address="0xwallet", risk=RISK)

        self.assertEqual(text, "Risky.")
        kwargs = create.await_args.kwargs
        self.assertEqual(kwargs["model"], "llama-3.3-70b-versatile")
        self.assertEqual(kwargs["max_tokens"], 300)

    async def test_provider_errors_propagate(self):
        ai = AIExplainClient(_settings(AI_ENABLED=True, AI_PROVIDER="openai", OPENAI_API_KEY="sk-test"))
        create = AsyncMock(side_effect=RuntimeError("upstream down"))
        ai.client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))

        with self.assertRaises(RuntimeError):
            await ai.explain(address="0xwallet", risk=RISK)

    def test_enabled_groq_without_key_fails_fast(self):
        with self.assertRaises(ValueError):
            _settings(AI_ENABLED=True, AI_PROVIDER="groq", GROQ_API_KEY=None)


if __name__ == "__main__":
    unittest.main()

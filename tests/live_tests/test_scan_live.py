import os
import unittest

import requests

LIVE_REQUIRED = ["BACKEND_BASE_URL", "LIVE_TX_HASH"]
DEFAULT_TIMEOUT = float(os.getenv("LIVE_HTTP_TIMEOUT", "60"))

# A long-lived, very active mainnet address
LIVE_WALLET = os.getenv("LIVE_WALLET", "0x742d35Cc6634C0532925a3b844Bc454e4438f44e")


def _has_live_env() -> bool:
    return all(os.getenv(k) for k in LIVE_REQUIRED)


def _scan(json_body: dict, headers: dict | None = None) -> requests.Response:
    base = os.environ["BACKEND_BASE_URL"].rstrip("/")
    return requests.post(f"{base}/scan", json=json_body, headers=headers or {}, timeout=DEFAULT_TIMEOUT)


@unittest.skipUnless(_has_live_env(), "LIVE env vars not set (BACKEND_BASE_URL, LIVE_TX_HASH)")
class TestScan_LiveBackend(unittest.TestCase):
    """
    Runs against a deployed backend (body proof source) with real
    Blockscout / Etherscan / LLM credentials. LIVE_TX_HASH must be a real
    $0.01 USDC transfer on Base to the backend's WALLET_ADDRESS.
    """

    def test_unpaid_scan_is_payment_required(self):
        r = _scan({"address": LIVE_WALLET})
        self.assertEqual(r.status_code, 402)
        self.assertTrue(r.json().get("payTo"))

    def test_paid_scan_returns_report(self):
        r = _scan({"address": LIVE_WALLET, "txHash": os.environ["LIVE_TX_HASH"]})
        self.assertEqual(r.status_code, 200, r.text)

        body = r.json()
        self.assertIn(body["riskLevel"], ("LOW", "MEDIUM", "HIGH"))
        self.assertIsInstance(body["flags"], list)
        self.assertTrue(body["aiExplanation"])
        self.assertIs(body["paymentVerified"], True)

    def test_bogus_tx_hash_is_rejected(self):
        r = _scan({"address": LIVE_WALLET, "txHash": "0x" + "00" * 32})
        self.assertEqual(r.status_code, 402)
        self.assertTrue(r.json().get("reason"))


if __name__ == "__main__":
    unittest.main()

import os
from pathlib import Path

from dotenv import load_dotenv


def _set_if_missing(name: str, value: str) -> None:
    """Only fill env vars the user did not set explicitly."""
    if os.getenv(name) is None or os.getenv(name) == "":
        os.environ[name] = value


# ---------------------------------------------------------
# Load .env from project root (same folder as app.py)
# ---------------------------------------------------------
ROOT = Path(__file__).resolve().parents[1]  # project root
load_dotenv(ROOT / ".env", override=False)

# ---------------------------------------------------------
# Settings are read once at import: seed what the app needs
# to start without real credentials.
# ---------------------------------------------------------
TEST_RECEIVER = "0xAbC0000000000000000000000000000000000001"

_set_if_missing("WALLET_ADDRESS", TEST_RECEIVER)
_set_if_missing("ETHERSCAN_API_KEY", "test-etherscan-key")
_set_if_missing("PAYMENT_PROOF_SOURCE", "body")
_set_if_missing("STATIC_DIR", str(ROOT / "public"))

# ---------------------------------------------------------
# Make tests deterministic (no real AI calls)
# ---------------------------------------------------------
if os.getenv("AI_ENABLED") is None:
    os.environ["AI_ENABLED"] = "false"

import math
import time
from typing import Optional

# -------------------------
# Rule thresholds / weights
# -------------------------
NO_HISTORY_WEIGHT = 20

FAILED_TX_THRESHOLD = 5
FAILED_TX_WEIGHT = 30

NEW_WALLET_DAYS = 30
NEW_WALLET_WEIGHT = 25

MANY_CONTRACTS_THRESHOLD = 50
MANY_CONTRACTS_WEIGHT = 15

HIGH_RISK_SCORE = 50
MEDIUM_RISK_SCORE = 25

SECONDS_PER_DAY = 86400


def level_from_score(score: int) -> str:
    if score >= HIGH_RISK_SCORE:
        return "HIGH"
    elif score >= MEDIUM_RISK_SCORE:
        return "MEDIUM"
    else:
        return "LOW"


def _is_failed(tx: dict) -> bool:
    return str(tx.get("isError")) == "1"


def _timestamp(tx: dict) -> Optional[int]:
    try:
        return int(tx.get("timeStamp"))
    except (TypeError, ValueError):
        return None


def compute_risk(transactions: list[dict], now: Optional[float] = None) -> dict:
    """
    Deterministic wallet heuristics over one page of transactions (newest first).

    Rules are additive, evaluated in a fixed order, never clamped:
      - empty history
      - many failed transactions
      - young wallet (oldest tx in the page)
      - many distinct recipients
    """
    now = time.time() if now is None else now

    score = 0
    flags: list[str] = []

    if len(transactions) == 0:
        score += NO_HISTORY_WEIGHT
        flags.append("No transaction history")

    failed = [tx for tx in transactions if _is_failed(tx)]
    if len(failed) > FAILED_TX_THRESHOLD:
        score += FAILED_TX_WEIGHT
        flags.append(f"High failed transaction count: {len(failed)}")

    if transactions:
        # page is sorted desc, so the last row is the oldest we know of
        first_ts = _timestamp(transactions[-1])
        if first_ts is not None:
            age_days = (now - first_ts) / SECONDS_PER_DAY
            if age_days < NEW_WALLET_DAYS:
                score += NEW_WALLET_WEIGHT
                flags.append(f"New wallet — only {math.floor(age_days)} days old")

    # empty recipients (contract creations) are just another value here
    unique_contracts = {tx.get("to") for tx in transactions}
    if len(unique_contracts) > MANY_CONTRACTS_THRESHOLD:
        score += MANY_CONTRACTS_WEIGHT
        flags.append(f"Interacts with many contracts: {len(unique_contracts)}")

    return {
        "risk_score": score,
        "risk_level": level_from_score(score),
        "flags": flags,
        "total_transactions": len(transactions),
        "failed_transactions": len(failed),
        "unique_contracts": len(unique_contracts),
    }

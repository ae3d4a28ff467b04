"""
Transaction submission seam for the simulated Polkadot / HyperLiquid bridge.

Real chain clients implement TransactionSubmitter; the fake one hashes the
payload so ids are stable for a given payload and nonce.
"""

from __future__ import annotations

import hashlib
import itertools
import json
import logging
from collections import deque
from typing import Any, Deque, Dict, Protocol

logger = logging.getLogger(__name__)


class TransactionSubmitter(Protocol):
    async def submit_transaction(self, payload: Dict[str, Any]) -> str:
        ...


def hash_hex(data: str) -> str:
    return "0x" + hashlib.sha3_256(data.encode("utf-8")).hexdigest()


def derive_address(*parts: str) -> str:
    """20-byte hex address from arbitrary seed parts"""
    return hash_hex(":".join(parts))[:42]


class FakeTransactionSubmitter:
    """In-memory submitter that fabricates transaction hashes."""

    def __init__(self, chain: str = "hyperliquid-testnet", history_size: int = 500):
        self.chain = chain
        self._nonce = itertools.count(1)
        # Most recent submissions only
        self.submitted: Deque[Dict[str, Any]] = deque(maxlen=history_size)

    def next_nonce(self) -> int:
        return next(self._nonce)

    async def submit_transaction(self, payload: Dict[str, Any]) -> str:
        nonce = self.next_nonce()
        canonical = json.dumps(payload, sort_keys=True, default=str)
        tx_hash = hash_hex(f"{self.chain}:{nonce}:{canonical}")
        self.submitted.append({"nonce": nonce, "tx_hash": tx_hash, "payload": payload})
        logger.info("Simulated %s transaction %s (nonce %d)", self.chain, tx_hash, nonce)
        return tx_hash

# slalom/services/session_service.py

import logging
import secrets
import time
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from slalom.domain.models import VaultDeployment
from slalom.infrastructure.chain.transaction_submitter import TransactionSubmitter

logger = logging.getLogger(__name__)


class WalletError(RuntimeError):
    """Raised for wallet operations on a disconnected or underfunded session"""


class SessionNotFound(KeyError):
    """Raised when a session id is unknown"""


@dataclass
class Payment:
    """SLALOM debit recorded against a session"""
    amount: float
    tx_hash: str
    timestamp: float
    memo: str


@dataclass
class WalletSession:
    """
    Demo wallet state for one user session.
    Passed explicitly to every call that needs it.
    """
    session_id: str
    address: Optional[str] = None
    balance: float = 100.0
    connected: bool = False
    payments: List[Payment] = field(default_factory=list)
    vaults: List[VaultDeployment] = field(default_factory=list)

    def connect(self, address: Optional[str] = None) -> str:
        self.address = address or "0x" + secrets.token_hex(20)
        self.connected = True
        logger.info("✅ Wallet connected for session %s: %s", self.session_id, self.address)
        return self.address

    def disconnect(self) -> None:
        self.connected = False

    def get_balance(self) -> float:
        if not self.connected:
            raise WalletError("Wallet not connected")
        return self.balance

    async def pay(self, amount: float, submitter: TransactionSubmitter, memo: str = "payment") -> Payment:
        """
        Deduct SLALOM from the session balance

        Raises:
            WalletError: wallet disconnected or balance too low
        """
        if not self.connected:
            raise WalletError("Wallet not connected")
        if amount <= 0:
            raise WalletError("Payment amount must be positive")
        if self.balance < amount:
            raise WalletError(f"Insufficient SLALOM balance. Need {amount:g}, have {self.balance:g}")

        tx_hash = await submitter.submit_transaction({
            "type": "SLALOM_PAYMENT",
            "from": self.address,
            "amount": amount,
            "memo": memo,
        })
        self.balance -= amount
        payment = Payment(amount=amount, tx_hash=tx_hash, timestamp=time.time(), memo=memo)
        self.payments.append(payment)
        logger.info("💸 Paid %g SLALOM (%s), balance %g", amount, memo, self.balance)
        return payment

    def refund(self, payment: Payment) -> None:
        """Credit a payment back after the action it paid for failed."""
        if payment not in self.payments:
            raise WalletError("Payment does not belong to this session")
        self.payments.remove(payment)
        self.balance += payment.amount
        logger.info("↩️ Refunded %g SLALOM (%s), balance %g", payment.amount, payment.memo, self.balance)


class SessionStore:
    """
    In-memory registry of wallet sessions, one per app instance.

    Sessions idle longer than idle_ttl_seconds are dropped, and past
    max_sessions the least recently used session is evicted.
    """

    def __init__(
        self,
        starting_balance: float = 100.0,
        max_sessions: int = 1000,
        idle_ttl_seconds: float = 3600.0,
        clock: Callable[[], float] = time.time,
    ):
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self.starting_balance = starting_balance
        self.max_sessions = max_sessions
        self.idle_ttl_seconds = idle_ttl_seconds
        self.clock = clock
        self._sessions: "OrderedDict[str, WalletSession]" = OrderedDict()
        self._last_seen: Dict[str, float] = {}

    def _touch(self, session_id: str) -> None:
        self._sessions.move_to_end(session_id)
        self._last_seen[session_id] = self.clock()

    def _drop(self, session_id: str, reason: str) -> None:
        self._sessions.pop(session_id, None)
        self._last_seen.pop(session_id, None)
        logger.info("Session %s removed (%s)", session_id, reason)

    def _expire_idle(self) -> None:
        cutoff = self.clock() - self.idle_ttl_seconds
        # Oldest first; stop at the first session still active
        for session_id in list(self._sessions):
            if self._last_seen[session_id] > cutoff:
                break
            self._drop(session_id, "idle")

    def create(self, address: Optional[str] = None) -> WalletSession:
        self._expire_idle()
        while len(self._sessions) >= self.max_sessions:
            oldest = next(iter(self._sessions))
            self._drop(oldest, "capacity")

        session = WalletSession(session_id=uuid.uuid4().hex, balance=self.starting_balance)
        session.connect(address)
        self._sessions[session.session_id] = session
        self._touch(session.session_id)
        return session

    def get(self, session_id: str) -> WalletSession:
        self._expire_idle()
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFound(session_id)
        self._touch(session_id)
        return session

    def close(self, session_id: str) -> WalletSession:
        """Disconnect the wallet and forget the session."""
        session = self.get(session_id)
        session.disconnect()
        self._drop(session_id, "closed")
        return session

    def __len__(self) -> int:
        return len(self._sessions)

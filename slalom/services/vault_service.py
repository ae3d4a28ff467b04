# slalom/services/vault_service.py

import logging
import time
from dataclasses import asdict
from typing import Sequence

from slalom.domain.models import (
    BondingProgress,
    PositionConfig,
    StrategyEvaluation,
    VaultDeployment,
)
from slalom.infrastructure.chain.transaction_submitter import TransactionSubmitter, derive_address
from slalom.services.session_service import WalletSession

logger = logging.getLogger(__name__)

BRIDGE_ACTION_VAULT_CREATION = "VAULT_CREATION"


class VaultDeploymentError(RuntimeError):
    """Raised when a vault cannot be deployed for a strategy"""


def _position_payload(position: PositionConfig) -> dict:
    data = asdict(position)
    data["direction"] = position.direction.value
    data["order_type"] = position.order_type.value
    return data


class VaultDeployer:
    """
    Deploys a strategy vault through the simulated Polkadot -> HyperLiquid bridge.

    Steps:
    1. Charge the creation fee from the session wallet
    2. Record the bridge action
    3. Submit the vault deployment
    4. Attach the vault to the session

    A failed submission in steps 2-3 refunds the fee.
    """

    def __init__(
        self,
        submitter: TransactionSubmitter,
        creation_fee: float = 1.0,
        bonding_target: float = 100.0,
    ):
        self.submitter = submitter
        self.creation_fee = creation_fee
        self.bonding_target = bonding_target

    async def deploy(
        self,
        session: WalletSession,
        name: str,
        description: str,
        positions: Sequence[PositionConfig],
        evaluation: StrategyEvaluation,
    ) -> VaultDeployment:
        """
        Raises:
            VaultDeploymentError: strategy not approved or vault name empty
            WalletError: session cannot pay the creation fee
        """
        if not evaluation.approved:
            raise VaultDeploymentError(
                f"Strategy not approved (grade {evaluation.grade.value}, score {evaluation.score})"
            )
        name = (name or "").strip()
        if not name:
            raise VaultDeploymentError("Vault name is required")

        logger.info("🌉 Deploying vault '%s' for session %s", name, session.session_id)

        payment = await session.pay(self.creation_fee, self.submitter, memo=f"vault creation: {name}")
        try:
            vault = await self._submit_vault(session, name, description, positions, evaluation)
        except Exception:
            logger.exception("Vault deployment failed for session %s, refunding fee", session.session_id)
            session.refund(payment)
            raise

        session.vaults.append(vault)
        logger.info("✅ Vault deployed: %s (tx %s)", vault.vault_address, vault.transaction_hash)
        return vault

    async def _submit_vault(
        self,
        session: WalletSession,
        name: str,
        description: str,
        positions: Sequence[PositionConfig],
        evaluation: StrategyEvaluation,
    ) -> VaultDeployment:
        strategy = [_position_payload(p) for p in positions]
        bridge_tx = await self.submitter.submit_transaction({
            "type": "SLALOM_BRIDGE",
            "action": BRIDGE_ACTION_VAULT_CREATION,
            "owner": session.address,
            "vault_name": name,
            "grade": evaluation.grade.value,
            "score": evaluation.score,
            "strategy": strategy,
        })

        deployed_at = time.time()
        vault_address = derive_address(session.address or "", name, bridge_tx)
        deploy_tx = await self.submitter.submit_transaction({
            "type": "VAULT_DEPLOYMENT",
            "vault_address": vault_address,
            "name": name,
            "description": description,
            "owner": session.address,
            "strategy": strategy,
            "created_at": deployed_at,
        })

        return VaultDeployment(
            vault_address=vault_address,
            transaction_hash=deploy_tx,
            bridge_transaction_hash=bridge_tx,
            name=name,
            description=description,
            owner=session.address or "",
            deployed_at=deployed_at,
            grade=evaluation.grade,
            score=evaluation.score,
            positions=list(positions),
            bonding=BondingProgress(current=self.creation_fee, target=self.bonding_target),
        )

    @staticmethod
    def bond(vault: VaultDeployment, usdc_amount: float) -> float:
        """
        Buy into a vault on its bonding curve

        Returns:
            Vault tokens minted at the current price
        """
        if usdc_amount <= 0:
            raise ValueError("Bond amount must be positive")
        price = vault.bonding.next_price
        vault.bonding.current += usdc_amount
        minted = usdc_amount / price
        logger.info("💰 Bonded %g USDC to %s, minted %.4f tokens", usdc_amount, vault.vault_address, minted)
        return minted

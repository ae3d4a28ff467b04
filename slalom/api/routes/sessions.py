"""
Session routes - demo wallet and vault deployment.
"""

from fastapi import APIRouter, Depends, HTTPException
import logging

from slalom.api.dependencies import KitchenServices, get_services
from slalom.domain.schemas.execution import (
    BalanceResponse,
    BondingProgressSchema,
    BondRequest,
    BondResponse,
    DeployVaultRequest,
    OpenSessionRequest,
    SessionSchema,
    VaultSchema,
)
from slalom.domain.services.allocation_rules import AllocationError
from slalom.services.session_service import SessionNotFound, WalletError, WalletSession
from slalom.services.vault_service import VaultDeploymentError

logger = logging.getLogger(__name__)
router = APIRouter()


def _session_or_404(services: KitchenServices, session_id: str) -> WalletSession:
    try:
        return services.sessions.get(session_id)
    except SessionNotFound:
        raise HTTPException(status_code=404, detail=f"Session not found: {session_id}")


def _session_schema(session: WalletSession) -> SessionSchema:
    return SessionSchema(
        session_id=session.session_id,
        address=session.address,
        balance=session.balance,
        connected=session.connected,
        vault_count=len(session.vaults),
    )


@router.post("", response_model=SessionSchema, status_code=201)
async def open_session(
    payload: OpenSessionRequest | None = None,
    services: KitchenServices = Depends(get_services),
):
    """Open a demo wallet session."""
    session = services.sessions.create(payload.address if payload else None)
    return _session_schema(session)


@router.get("/{session_id}", response_model=SessionSchema)
async def get_session(session_id: str, services: KitchenServices = Depends(get_services)):
    return _session_schema(_session_or_404(services, session_id))


@router.delete("/{session_id}", response_model=SessionSchema)
async def close_session(session_id: str, services: KitchenServices = Depends(get_services)):
    """Disconnect the wallet and forget the session."""
    try:
        session = services.sessions.close(session_id)
    except SessionNotFound:
        raise HTTPException(status_code=404, detail=f"Session not found: {session_id}")
    return _session_schema(session)


@router.post("/{session_id}/disconnect", response_model=SessionSchema)
async def disconnect_wallet(session_id: str, services: KitchenServices = Depends(get_services)):
    """Disconnect the wallet; vaults stay readable but nothing can be paid."""
    session = _session_or_404(services, session_id)
    session.disconnect()
    logger.info("Wallet disconnected for session %s", session_id)
    return _session_schema(session)


@router.get("/{session_id}/balance", response_model=BalanceResponse)
async def get_balance(session_id: str, services: KitchenServices = Depends(get_services)):
    session = _session_or_404(services, session_id)
    try:
        balance = session.get_balance()
    except WalletError as exc:
        raise HTTPException(status_code=402, detail=str(exc))
    return BalanceResponse(session_id=session.session_id, address=session.address, balance=balance)


@router.get("/{session_id}/vaults", response_model=list[VaultSchema])
async def list_vaults(session_id: str, services: KitchenServices = Depends(get_services)):
    session = _session_or_404(services, session_id)
    return [VaultSchema.from_domain(v) for v in session.vaults]


@router.post("/{session_id}/vaults", response_model=VaultSchema, status_code=201)
async def deploy_vault(
    session_id: str,
    payload: DeployVaultRequest,
    services: KitchenServices = Depends(get_services),
):
    """
    Evaluate the strategy and deploy it as a vault.

    400: allocations invalid, 402: wallet cannot pay, 409: strategy not approved
    """
    session = _session_or_404(services, session_id)
    positions = payload.to_domain()

    try:
        evaluation = services.strategy.evaluate_strategy(positions)
    except AllocationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    try:
        vault = await services.vaults.deploy(
            session,
            name=payload.name,
            description=payload.description,
            positions=positions,
            evaluation=evaluation,
        )
    except VaultDeploymentError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    except WalletError as exc:
        raise HTTPException(status_code=402, detail=str(exc))

    return VaultSchema.from_domain(vault)


@router.post("/{session_id}/vaults/{vault_address}/bond", response_model=BondResponse)
async def bond_to_vault(
    session_id: str,
    vault_address: str,
    payload: BondRequest,
    services: KitchenServices = Depends(get_services),
):
    session = _session_or_404(services, session_id)
    vault = next((v for v in session.vaults if v.vault_address == vault_address), None)
    if vault is None:
        raise HTTPException(status_code=404, detail="Vault not found")

    minted = services.vaults.bond(vault, payload.usdc_amount)
    return BondResponse(
        tokens_minted=minted,
        bonding_progress=BondingProgressSchema.from_domain(vault.bonding),
    )

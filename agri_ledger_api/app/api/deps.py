"""
FastAPI dependencies resolving the application state and services.

The ``LedgerState`` is attached to ``app.state.ledger`` by
``create_app``; handlers never reach for module level state.
"""

from fastapi import Depends, Request

from agri_ledger_api.app.core.state import LedgerState
from agri_ledger_api.app.services import (
    CropInsuranceService,
    DebtService,
    EscrowService,
    InsuranceClaimService,
)


def get_state(request: Request) -> LedgerState:
    state = getattr(request.app.state, "ledger", None)
    if state is None:
        raise RuntimeError("ledger state is not initialised; was the startup event run?")
    return state


def get_debt_service(state: LedgerState = Depends(get_state)) -> DebtService:
    return DebtService(state)


def get_escrow_service(state: LedgerState = Depends(get_state)) -> EscrowService:
    return EscrowService(state)


def get_crop_insurance_service(state: LedgerState = Depends(get_state)) -> CropInsuranceService:
    return CropInsuranceService(state)


def get_insurance_claim_service(state: LedgerState = Depends(get_state)) -> InsuranceClaimService:
    return InsuranceClaimService(state)

"""
Escrow endpoints for API v1.

Escrows are addressed by the id of the debt they secure.  Posting a
second escrow for the same debt replaces the first one.
"""

from fastapi import APIRouter, Depends, HTTPException, Path, status

from agri_ledger_api.app.api.deps import get_escrow_service
from agri_ledger_api.app.core.errors import InvalidInputError, NotFoundError
from agri_ledger_api.app.core.ids import U64_MAX
from agri_ledger_api.app.schemas.escrow import EscrowCreate, EscrowRead
from agri_ledger_api.app.services.escrow_service import EscrowService

router = APIRouter()


@router.get("/{debt_id}", response_model=EscrowRead)
async def get_escrow(
    debt_id: int = Path(..., ge=0, le=U64_MAX, description="Identifier of the secured debt"),
    service: EscrowService = Depends(get_escrow_service),
) -> EscrowRead:
    try:
        return service.get_escrow(debt_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/", response_model=EscrowRead, status_code=status.HTTP_201_CREATED)
async def create_escrow(
    escrow: EscrowCreate,
    service: EscrowService = Depends(get_escrow_service),
) -> EscrowRead:
    """Create an escrow for an existing debt.

    Returns 400 for a zero amount and 404 if the debt does not exist.
    """
    try:
        return service.create_escrow(escrow)
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

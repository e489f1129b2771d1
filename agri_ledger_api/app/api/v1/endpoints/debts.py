"""
Debt endpoints for API v1.

``POST /`` keeps the empty‑result convention of the service: an
invalid payload (empty debtor or creditor, zero amount) is answered
with ``200`` and a ``null`` body instead of an error.  ``PUT /{id}``
reports the same problem as ``400``.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status

from agri_ledger_api.app.api.deps import get_debt_service
from agri_ledger_api.app.core.errors import InvalidInputError, NotFoundError
from agri_ledger_api.app.core.ids import U64_MAX
from agri_ledger_api.app.schemas.debt import DebtCreate, DebtRead
from agri_ledger_api.app.services.debt_service import DebtService

router = APIRouter()


@router.get("/{debt_id}", response_model=DebtRead)
async def get_debt(
    debt_id: int = Path(..., ge=0, le=U64_MAX, description="Debt identifier"),
    service: DebtService = Depends(get_debt_service),
) -> DebtRead:
    """Retrieve a single debt by its ID.  Returns 404 if it does not exist."""
    try:
        return service.get_debt(debt_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/", response_model=Optional[DebtRead], status_code=status.HTTP_201_CREATED)
async def add_debt(
    debt: DebtCreate,
    response: Response,
    service: DebtService = Depends(get_debt_service),
) -> Optional[DebtRead]:
    """Create a new debt.

    Returns the created debt with 201, or ``null`` with 200 when the
    payload fails validation.
    """
    created = service.add_debt(debt)
    if created is None:
        response.status_code = status.HTTP_200_OK
    return created


@router.put("/{debt_id}", response_model=DebtRead)
async def update_debt(
    debt: DebtCreate,
    debt_id: int = Path(..., ge=0, le=U64_MAX, description="Debt identifier"),
    service: DebtService = Depends(get_debt_service),
) -> DebtRead:
    """Replace debtor, creditor and amount of an existing debt.

    Validation runs first (400), then the lookup (404).
    """
    try:
        return service.update_debt(debt_id, debt)
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

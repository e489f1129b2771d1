"""
Crop insurance endpoints for API v1.

Purchasing a policy follows the same convention as creating a debt:
invalid input yields ``200`` with a ``null`` body.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status

from agri_ledger_api.app.api.deps import get_crop_insurance_service
from agri_ledger_api.app.core.errors import NotFoundError
from agri_ledger_api.app.core.ids import U64_MAX
from agri_ledger_api.app.schemas.insurance import CropInsuranceCreate, CropInsuranceRead
from agri_ledger_api.app.services.crop_insurance_service import CropInsuranceService

router = APIRouter()


@router.get("/{insurance_id}", response_model=CropInsuranceRead)
async def get_crop_insurance(
    insurance_id: int = Path(..., ge=0, le=U64_MAX, description="Policy identifier"),
    service: CropInsuranceService = Depends(get_crop_insurance_service),
) -> CropInsuranceRead:
    try:
        return service.get_crop_insurance(insurance_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/", response_model=Optional[CropInsuranceRead], status_code=status.HTTP_201_CREATED)
async def purchase_crop_insurance(
    insurance: CropInsuranceCreate,
    response: Response,
    service: CropInsuranceService = Depends(get_crop_insurance_service),
) -> Optional[CropInsuranceRead]:
    """Purchase a crop insurance policy (201), or ``null`` (200) for invalid input."""
    created = service.purchase_crop_insurance(insurance)
    if created is None:
        response.status_code = status.HTTP_200_OK
    return created

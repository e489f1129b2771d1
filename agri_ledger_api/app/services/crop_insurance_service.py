"""
Business logic for crop insurance policies.

Like ``add_debt``, purchasing a policy answers invalid input with an
empty result rather than an error.
"""

import logging
from typing import Optional

from agri_ledger_api.app.core.errors import NotFoundError
from agri_ledger_api.app.core.state import LedgerState
from agri_ledger_api.app.schemas.insurance import CropInsuranceCreate, CropInsuranceRead
from agri_ledger_api.app.services.validation import is_valid_crop_insurance


class CropInsuranceService:
    """Service for purchasing and reading crop insurance policies."""

    def __init__(self, state: LedgerState) -> None:
        self.state = state

    def get_crop_insurance(self, insurance_id: int) -> CropInsuranceRead:
        insurance = self.state.crop_insurances.get(insurance_id)
        if insurance is None:
            raise NotFoundError(f"crop insurance with id={insurance_id} not found")
        return insurance

    def purchase_crop_insurance(self, data: CropInsuranceCreate) -> Optional[CropInsuranceRead]:
        """Store a new policy, or return ``None`` for invalid input."""
        logger = logging.getLogger(__name__)
        if not is_valid_crop_insurance(data):
            logger.debug("Rejected crop insurance payload")
            return None
        with self.state.transaction():
            insurance_id = self.state.ids.next_id()
            insurance = CropInsuranceRead(id=insurance_id, **data.model_dump())
            self.state.crop_insurances.put(insurance_id, insurance)
        logger.info("Created crop insurance %s for %s", insurance_id, data.crop_type)
        return insurance

"""
Business logic for insurance claims.

A claim only has to reference an existing policy.  The claimed amount
is not validated at all: zero is accepted, and so is an amount above
the policy's coverage.
"""

import logging

from agri_ledger_api.app.core.errors import NotFoundError
from agri_ledger_api.app.core.state import LedgerState
from agri_ledger_api.app.schemas.insurance import InsuranceClaimCreate, InsuranceClaimRead


class InsuranceClaimService:
    def __init__(self, state: LedgerState) -> None:
        self.state = state

    def get_insurance_claim(self, claim_id: int) -> InsuranceClaimRead:
        claim = self.state.insurance_claims.get(claim_id)
        if claim is None:
            raise NotFoundError(f"insurance claim with id={claim_id} not found")
        return claim

    def submit_insurance_claim(self, data: InsuranceClaimCreate) -> InsuranceClaimRead:
        logger = logging.getLogger(__name__)
        with self.state.transaction():
            if self.state.crop_insurances.get(data.insurance_id) is None:
                raise NotFoundError(
                    f"couldn't submit a claim for crop insurance with id={data.insurance_id}."
                    " insurance not found"
                )
            claim_id = self.state.ids.next_id()
            claim = InsuranceClaimRead(id=claim_id, claim_date=self.state.now(), **data.model_dump())
            self.state.insurance_claims.put(claim_id, claim)
        logger.info("Submitted claim %s against crop insurance %s", claim_id, data.insurance_id)
        return claim

from __future__ import annotations

import pytest

from agri_ledger_api.app.core.errors import NotFoundError
from agri_ledger_api.app.schemas.debt import DebtCreate
from agri_ledger_api.app.schemas.escrow import EscrowCreate
from agri_ledger_api.app.schemas.insurance import CropInsuranceCreate, InsuranceClaimCreate
from agri_ledger_api.app.services import (
    CropInsuranceService,
    DebtService,
    EscrowService,
    InsuranceClaimService,
)


def _policy(**overrides) -> CropInsuranceCreate:
    fields = dict(
        farmer="farmerA",
        crop_type="wheat",
        coverage_amount=1000,
        coverage_start_date=100,
        coverage_end_date=200,
    )
    fields.update(overrides)
    return CropInsuranceCreate(**fields)


def test_purchase_and_get_crop_insurance(state):
    service = CropInsuranceService(state)
    policy = service.purchase_crop_insurance(_policy())

    assert policy.id == 1
    assert (policy.coverage_start_date, policy.coverage_end_date) == (100, 200)
    assert service.get_crop_insurance(policy.id) == policy


@pytest.mark.parametrize(
    "overrides",
    [{"farmer": ""}, {"crop_type": ""}, {"coverage_amount": 0}],
)
def test_purchase_invalid_returns_none(state, overrides):
    assert CropInsuranceService(state).purchase_crop_insurance(_policy(**overrides)) is None
    assert state.ids.current() == 0


def test_purchase_accepts_reversed_coverage_dates(state):
    policy = CropInsuranceService(state).purchase_crop_insurance(
        _policy(coverage_start_date=900, coverage_end_date=10)
    )
    assert policy is not None


def test_get_missing_crop_insurance(state):
    with pytest.raises(NotFoundError, match="crop insurance with id=8 not found"):
        CropInsuranceService(state).get_crop_insurance(8)


def test_claim_above_coverage_is_accepted(state):
    policy = CropInsuranceService(state).purchase_crop_insurance(_policy())
    service = InsuranceClaimService(state)

    claim = service.submit_insurance_claim(
        InsuranceClaimCreate(insurance_id=policy.id, claim_amount=1500)
    )

    assert (claim.insurance_id, claim.claim_amount) == (policy.id, 1500)
    assert claim.id == policy.id + 1
    assert service.get_insurance_claim(claim.id) == claim


def test_zero_claim_is_accepted(state):
    policy = CropInsuranceService(state).purchase_crop_insurance(_policy())
    claim = InsuranceClaimService(state).submit_insurance_claim(
        InsuranceClaimCreate(insurance_id=policy.id, claim_amount=0)
    )
    assert claim.claim_amount == 0


def test_claim_for_missing_policy_is_not_found(state):
    with pytest.raises(NotFoundError, match="insurance not found"):
        InsuranceClaimService(state).submit_insurance_claim(
            InsuranceClaimCreate(insurance_id=3, claim_amount=10)
        )
    assert state.ids.current() == 0


def test_claim_against_debt_id_is_not_found(state):
    debt = DebtService(state).add_debt(DebtCreate(debtor="alice", creditor="bob", amount=1))
    with pytest.raises(NotFoundError):
        InsuranceClaimService(state).submit_insurance_claim(
            InsuranceClaimCreate(insurance_id=debt.id, claim_amount=10)
        )


def test_get_missing_claim(state):
    with pytest.raises(NotFoundError, match="insurance claim with id=4 not found"):
        InsuranceClaimService(state).get_insurance_claim(4)


def test_ids_strictly_increase_across_record_kinds(state):
    debts = DebtService(state)
    policies = CropInsuranceService(state)
    claims = InsuranceClaimService(state)
    escrows = EscrowService(state)

    issued = []
    debt = debts.add_debt(DebtCreate(debtor="a", creditor="b", amount=1))
    issued.append(debt.id)
    policy = policies.purchase_crop_insurance(_policy())
    issued.append(policy.id)
    escrows.create_escrow(EscrowCreate(debt_id=debt.id, amount=1))
    issued.append(claims.submit_insurance_claim(InsuranceClaimCreate(insurance_id=policy.id, claim_amount=1)).id)
    issued.append(debts.add_debt(DebtCreate(debtor="c", creditor="d", amount=2)).id)
    issued.append(policies.purchase_crop_insurance(_policy(farmer="farmerB")).id)

    assert issued == sorted(set(issued))
    assert issued == [1, 2, 3, 4, 5]

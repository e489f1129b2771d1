"""
Business logic for escrows.

There is at most one escrow per debt: escrows are stored under the id
of the debt they secure, and creating another escrow for the same
debt overwrites the previous one.
"""

import logging

from agri_ledger_api.app.core.errors import InvalidInputError, NotFoundError
from agri_ledger_api.app.core.state import LedgerState
from agri_ledger_api.app.schemas.escrow import EscrowCreate, EscrowRead
from agri_ledger_api.app.services.validation import is_valid_escrow


class EscrowService:
    def __init__(self, state: LedgerState) -> None:
        self.state = state

    def get_escrow(self, debt_id: int) -> EscrowRead:
        escrow = self.state.escrows.get(debt_id)
        if escrow is None:
            raise NotFoundError(f"escrow for debt_id={debt_id} not found")
        return escrow

    def create_escrow(self, data: EscrowCreate) -> EscrowRead:
        """Create (or replace) the escrow of an existing debt.

        Raises ``InvalidInputError`` for a zero amount and
        ``NotFoundError`` if the debt does not exist.  Escrows carry no
        identifier, so the counter is left untouched.
        """
        logger = logging.getLogger(__name__)
        if not is_valid_escrow(data):
            raise InvalidInputError("Invalid escrow amount")
        with self.state.transaction():
            if self.state.debts.get(data.debt_id) is None:
                raise NotFoundError(
                    f"couldn't create escrow for debt_id={data.debt_id}. debt not found"
                )
            escrow = EscrowRead(created_at=self.state.now(), **data.model_dump())
            self.state.escrows.put(data.debt_id, escrow)
        logger.info("Created escrow for debt %s", data.debt_id)
        return escrow

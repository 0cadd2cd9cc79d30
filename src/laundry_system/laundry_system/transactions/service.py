from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..catalog.repository import ServiceRepository
from ..core.enums import Role
from ..core.exceptions import NotFoundError, SelectionError, ValidationError
from ..core.result import returns_result
from ..policies.query_policies import Operation, policy_for
from ..users.repository import UserRepository
from ..validation.rules import check_transaction
from . import lifecycle
from .lifecycle import Transition
from .model import Transaction
from .repository import TransactionRepository

logger = logging.getLogger(__name__)


class TransactionService:
    """Use cases: create, assign and finish laundry orders, plus role-scoped listings."""

    def __init__(self, transactions: TransactionRepository, services: ServiceRepository, users: UserRepository):
        self._transactions = transactions
        self._services = services
        self._users = users

    def _require(self, transaction_id: int) -> Transaction:
        tx = self._transactions.get_by_id(int(transaction_id))
        if not tx:
            raise NotFoundError("Transaction not found.")
        return tx

    def _list(self, role: Role, *, actor_id: Optional[int] = None, status_filter: Optional[str] = None):
        query = policy_for(role, Operation.LIST_TRANSACTIONS, actor_id=actor_id, status_filter=status_filter)
        return self._transactions.find(query)

    @returns_result
    def get_transaction(self, transaction_id: int) -> Transaction:
        return self._require(transaction_id)

    @returns_result
    def create_transaction(
        self,
        *,
        service_id: Optional[int],
        customer_id: int,
        weight: Any,
        notes: Optional[str],
    ) -> int:
        if service_id is None:
            raise SelectionError("Please select a service.")

        data = check_transaction(weight, notes).raise_for_reason()

        if not self._services.get_by_id(int(service_id)):
            raise NotFoundError("Service not found.")

        transaction_id = self._transactions.create_transaction(
            service_id=int(service_id),
            customer_id=int(customer_id),
            weight=data.weight,
            notes=data.notes,
        )
        logger.info(
            "Created transaction transaction_id=%s customer_id=%s service_id=%s",
            transaction_id,
            customer_id,
            service_id,
        )
        return transaction_id

    @returns_result
    def assign(self, *, transaction_id: Optional[int], staff_id: Optional[int], receptionist_id: int) -> None:
        if transaction_id is None:
            raise SelectionError("Please select a Transaction.")
        if staff_id is None:
            raise SelectionError("Please select a Staff worker.")

        tx = self._require(transaction_id)
        lifecycle.validate_transition(tx, Transition.ASSIGN)

        staff = self._users.get_by_id(int(staff_id))
        if not staff:
            raise NotFoundError("Staff not found.")
        if staff.role != Role.LAUNDRY_STAFF:
            raise ValidationError("Selected user is not a Laundry Staff.")

        assigned = self._transactions.assign(
            transaction_id=tx.transaction_id,
            staff_id=staff.user_id,
            receptionist_id=int(receptionist_id),
        )
        if not assigned:
            # Someone else assigned or finished it between the read and the write.
            current = self._require(tx.transaction_id)
            state = lifecycle.state_of(current.status, current.laundry_staff_id)
            raise ValidationError(lifecycle.rejection_reason(state))

        logger.info(
            "Assigned transaction_id=%s to staff_id=%s by receptionist_id=%s",
            tx.transaction_id,
            staff.user_id,
            receptionist_id,
        )

    @returns_result
    def finish(self, transaction_id: Optional[int]) -> None:
        if transaction_id is None:
            raise SelectionError("Please select a Transaction.")

        tx = self._require(transaction_id)
        lifecycle.validate_transition(tx, Transition.FINISH)

        if not self._transactions.mark_finished(transaction_id=tx.transaction_id):
            raise ValidationError("Transaction is already finished.")

        logger.info("Finished transaction_id=%s", tx.transaction_id)

    @returns_result
    def list_for(
        self,
        role: Role,
        *,
        actor_id: Optional[int] = None,
        status_filter: Optional[str] = None,
    ) -> Sequence[Transaction]:
        return self._list(role, actor_id=actor_id, status_filter=status_filter)

    @returns_result
    def transaction_history(self, customer_id: int) -> Sequence[Transaction]:
        return self._list(Role.CUSTOMER, actor_id=customer_id)

    @returns_result
    def assignment_queue(self) -> Sequence[Transaction]:
        return self._list(Role.RECEPTIONIST)

    @returns_result
    def staff_job_queue(self, staff_id: int) -> Sequence[Transaction]:
        return self._list(Role.LAUNDRY_STAFF, actor_id=staff_id)

    @returns_result
    def all_transactions(self, status_filter: Optional[str] = None) -> Sequence[Transaction]:
        return self._list(Role.ADMIN, status_filter=status_filter)

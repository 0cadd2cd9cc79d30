"""Transaction lifecycle rules.

This module defines the ONLY allowed transitions of a Transaction. It has no
store access and no side effects; services ask it what may happen and which
fields a transition writes.

    Pending-Unassigned --assign--> Pending-Assigned
    Pending-Unassigned --finish--> Finished
    Pending-Assigned   --finish--> Finished
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from ..core.enums import TransactionStatus
from ..core.exceptions import ValidationError
from .model import Transaction


class TransactionState(str, Enum):
    PENDING_UNASSIGNED = "Pending-Unassigned"
    PENDING_ASSIGNED = "Pending-Assigned"
    FINISHED = "Finished"


class Transition(str, Enum):
    ASSIGN = "assign"
    FINISH = "finish"


INITIAL_STATE = TransactionState.PENDING_UNASSIGNED

TERMINAL_STATES = frozenset({TransactionState.FINISHED})

# transition -> states it may start from
ALLOWED_TRANSITIONS: dict[Transition, frozenset[TransactionState]] = {
    Transition.ASSIGN: frozenset({TransactionState.PENDING_UNASSIGNED}),
    Transition.FINISH: frozenset({TransactionState.PENDING_UNASSIGNED, TransactionState.PENDING_ASSIGNED}),
}

TARGET_STATE: dict[Transition, TransactionState] = {
    Transition.ASSIGN: TransactionState.PENDING_ASSIGNED,
    Transition.FINISH: TransactionState.FINISHED,
}

# Row values each source state must still have when the write lands.
_STATE_GUARDS: dict[TransactionState, dict[str, Any]] = {
    TransactionState.PENDING_UNASSIGNED: {"status": TransactionStatus.PENDING, "laundry_staff_id": None},
    TransactionState.PENDING_ASSIGNED: {"status": TransactionStatus.PENDING},
}


def state_of(status: TransactionStatus, laundry_staff_id: Optional[int]) -> TransactionState:
    if TransactionStatus(status) == TransactionStatus.FINISHED:
        return TransactionState.FINISHED
    if laundry_staff_id is None:
        return TransactionState.PENDING_UNASSIGNED
    return TransactionState.PENDING_ASSIGNED


def can_transition(state: TransactionState, transition: Transition) -> bool:
    if state in TERMINAL_STATES:
        return False
    return state in ALLOWED_TRANSITIONS[transition]


def validate_transition(tx: Transaction, transition: Transition) -> TransactionState:
    """Raise ValidationError unless ``transition`` is allowed; return the target state."""
    state = state_of(tx.status, tx.laundry_staff_id)
    if not can_transition(state, transition):
        raise ValidationError(rejection_reason(state))
    return TARGET_STATE[transition]


def rejection_reason(state: TransactionState) -> str:
    if state == TransactionState.FINISHED:
        return "Transaction is already finished."
    return "Transaction is already assigned."


def initial_fields() -> dict[str, Any]:
    return {
        "status": TransactionStatus.PENDING,
        "receptionist_id": None,
        "laundry_staff_id": None,
    }


def assignment_fields(staff_id: int, receptionist_id: int) -> dict[str, Any]:
    """Assignment always writes both references together."""
    return {"laundry_staff_id": int(staff_id), "receptionist_id": int(receptionist_id)}


def finish_fields() -> dict[str, Any]:
    return {"status": TransactionStatus.FINISHED}


def assign_guard() -> dict[str, Any]:
    return dict(_STATE_GUARDS[TransactionState.PENDING_UNASSIGNED])


def finish_guard() -> dict[str, Any]:
    # Either pending state may finish; only the status matters.
    return dict(_STATE_GUARDS[TransactionState.PENDING_ASSIGNED])

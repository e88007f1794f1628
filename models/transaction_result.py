"""Outcome of a deposit or withdrawal."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FailureReason(Enum):
    """Why a transaction did not change the balance."""

    INVALID_AMOUNT = "invalid_amount"
    INSUFFICIENT_FUNDS = "insufficient_funds"


@dataclass(frozen=True)
class TransactionResult:
    """Represents the result of a single balance operation.

    Attributes:
        ok: True if the balance was changed.
        reason: Failure reason, None on success.
        message: Human readable explanation of the failure, None on success.
    """

    ok: bool
    reason: Optional[FailureReason] = None
    message: Optional[str] = None

    @classmethod
    def success(cls) -> "TransactionResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, reason: FailureReason, message: str) -> "TransactionResult":
        return cls(ok=False, reason=reason, message=message)

    @property
    def is_invalid_amount(self) -> bool:
        return self.reason is FailureReason.INVALID_AMOUNT

    def __bool__(self) -> bool:
        return self.ok

"""Point 도메인 예외."""

from apps.cleanup.domain.exceptions.base import DomainError


class InsufficientBalanceError(DomainError):
    """보유 포인트 부족."""

    def __init__(self, user_id: int | None, balance: int, required: int) -> None:
        self.user_id = user_id
        self.balance = balance
        self.required = required
        super().__init__(f"Insufficient balance: current={balance}, required={required}")

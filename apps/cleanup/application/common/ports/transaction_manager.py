"""Transaction manager port."""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import Protocol


class TransactionManager(Protocol):
    """트랜잭션 관리 포트."""

    async def commit(self) -> None:
        """트랜잭션을 커밋합니다."""
        ...

    async def rollback(self) -> None:
        """트랜잭션을 롤백합니다."""
        ...

    def savepoint(self) -> AbstractAsyncContextManager[None]:
        """중첩 트랜잭션(SAVEPOINT) 구간.

        블록 안에서 예외가 나면 블록의 변경만 롤백되고 예외는 전파됩니다.
        """
        ...

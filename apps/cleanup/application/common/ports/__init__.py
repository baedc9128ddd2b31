"""Common application ports."""

from apps.cleanup.application.common.ports.image_store import ImageStore
from apps.cleanup.application.common.ports.transaction_manager import TransactionManager

__all__ = ["ImageStore", "TransactionManager"]

"""
Shared interface contracts for supplier storage and review requests.

- SupplierLoad: outcome of reading the supplier document (store -> callers)
- ReviewRequest: one submitted review modal (Slack modal -> handlers)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class LoadStatus(str, Enum):
    """Outcome of reading the supplier document."""
    OK = 'ok'
    MISSING = 'missing'    # No document on disk
    CORRUPT = 'corrupt'    # Unparseable JSON or wrong shape


@dataclass
class SupplierLoad:
    """Supplier list as read from disk, with the read outcome."""
    status: LoadStatus
    suppliers: list[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == LoadStatus.OK


@dataclass
class ReviewRequest:
    """An invoice review modal submission. Never persisted."""
    user_id: str
    supplier: Optional[str] = None
    notes: str = ''
    channel_id: Optional[str] = None   # Channel the modal was opened from

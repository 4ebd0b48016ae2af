"""Supplier list storage."""

from invoice_review.suppliers.interfaces import LoadStatus, ReviewRequest, SupplierLoad
from invoice_review.suppliers.store import SupplierStore, normalize_supplier_names

__all__ = [
    'LoadStatus',
    'ReviewRequest',
    'SupplierLoad',
    'SupplierStore',
    'normalize_supplier_names',
]

"""Supplier list persisted as a JSON document.

File shape: {"suppliers": ["OHC", "Bospeed", ...]}

The store is the only writer of the file. Writes replace the whole document;
there is no locking, so two concurrent add() calls can race and the later
write wins (one addition may be lost). Acceptable for a small team adding
suppliers by hand.
"""

import json
import logging
from pathlib import Path
from typing import Iterable

from .interfaces import LoadStatus, SupplierLoad

logger = logging.getLogger(__name__)


def normalize_supplier_names(names: Iterable[str]) -> list[str]:
    """Trim names, drop empties and duplicates, keep first-seen order.

    Comparison is exact after trimming: "OHC" and "ohc" are distinct.
    """
    seen = set()
    normalized = []
    for name in names:
        name = name.strip()
        if name and name not in seen:
            seen.add(name)
            normalized.append(name)
    return normalized


class SupplierStore:
    """Supplier names backed by a single JSON file.

    Args:
        path: Location of the JSON document (parent dirs are created as needed)
        seed: Names written to the document when it does not exist yet
    """

    def __init__(self, path, seed: Iterable[str] = ()):
        self.path = Path(path)
        self.seed = tuple(seed)

    def __repr__(self):
        return f"SupplierStore(path={str(self.path)!r})"

    def ensure_initialized(self):
        """Create the data directory and seed the document if it is missing.

        An existing document is left untouched.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            seeded = self._write(normalize_supplier_names(self.seed))
            logger.info(f"Seeded {self.path} with {len(seeded)} suppliers")

    def read(self) -> SupplierLoad:
        """Read the document without creating or repairing anything."""
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            return SupplierLoad(LoadStatus.MISSING, error=f"{self.path} does not exist")
        except (OSError, ValueError) as e:
            return SupplierLoad(LoadStatus.CORRUPT, error=str(e))

        suppliers = data.get('suppliers') if isinstance(data, dict) else None
        if not isinstance(suppliers, list):
            return SupplierLoad(LoadStatus.CORRUPT, error="'suppliers' is not a list")
        names = [name for name in suppliers if isinstance(name, str)]
        if len(names) < len(suppliers):
            # Keep the readable names so a later add() cannot wipe them
            dropped = len(suppliers) - len(names)
            return SupplierLoad(LoadStatus.OK, suppliers=names, error=f"dropped {dropped} non-string entries")

        return SupplierLoad(LoadStatus.OK, suppliers=names)

    def load(self) -> list[str]:
        """Return the supplier list in stored order.

        An unreadable document reads as an empty list so command handling
        keeps working; the problem is only logged.
        """
        self.ensure_initialized()
        result = self.read()
        if not result.ok:
            return self._treat_unreadable_as_empty(result)
        if result.error:
            logger.warning(f"Supplier store {self.path}: {result.error}")
        return result.suppliers

    def save(self, names: Iterable[str]) -> list[str]:
        """Normalize names, overwrite the document, and return what was written.

        OSError from the write (permissions, full disk) is not caught.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        return self._write(normalize_supplier_names(names))

    def add(self, name: str) -> list[str]:
        """Append a supplier to the current list and persist it."""
        return self.save([*self.load(), name])

    def _treat_unreadable_as_empty(self, result: SupplierLoad) -> list[str]:
        logger.warning(
            f"Supplier store {self.path} unreadable ({result.status.value}): {result.error}"
        )
        return []

    def _write(self, suppliers: list[str]) -> list[str]:
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump({'suppliers': suppliers}, f, indent=2, ensure_ascii=False)
        return suppliers

"""In-memory record store for one admin view.

A ``RecordStore`` owns the ordered list of records (members, team members,
tiers, matches or recaps) of one view for the lifetime of a browser session.
Create, update and delete always replace the internal list with a new one, so
a list previously returned by ``records`` never changes underneath a caller.

Conventions:
- New records get an id ``<prefix>-<n>`` where n is one above the highest
  numeric suffix already used, and are inserted at the head of the list.
- ``get``, ``update`` and ``delete`` raise ``NotFoundError`` for unknown ids.
"""

import logging
import re
from typing import Any, Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)


class NotFoundError(LookupError):
    """Raised when a record id is not present in the store."""

    def __init__(self, record_id: str, store_name: str = "records"):
        self.record_id = record_id
        self.store_name = store_name
        super().__init__(f"No record with id {record_id!r} in {store_name}")


class RecordStore:
    """Ordered, session-scoped collection of records with unique ids."""

    def __init__(self, records: Iterable[Dict[str, Any]], id_prefix: str, name: Optional[str] = None):
        self.id_prefix = id_prefix
        self.name = name or id_prefix
        self._records: List[Dict[str, Any]] = [dict(r) for r in records]

        seen = set()
        for record in self._records:
            record_id = record.get('id')
            if not record_id:
                raise ValueError(f"Record without id in {self.name}: {record!r}")
            if record_id in seen:
                raise ValueError(f"Duplicate id {record_id!r} in {self.name}")
            seen.add(record_id)

        self._id_pattern = re.compile(rf"^{re.escape(id_prefix)}-(\d+)$")

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    def __contains__(self, record_id) -> bool:
        return self._index_of(record_id) is not None

    @property
    def records(self) -> List[Dict[str, Any]]:
        """Current records in display order (a list the caller may keep)."""
        return self._records

    def _index_of(self, record_id: str) -> Optional[int]:
        for index, record in enumerate(self._records):
            if record['id'] == record_id:
                return index
        return None

    def next_id(self) -> str:
        """Return an id not used by any record in the store."""
        highest = 0
        for record in self._records:
            match = self._id_pattern.match(record['id'])
            if match:
                highest = max(highest, int(match.group(1)))
        return f"{self.id_prefix}-{highest + 1}"

    def get(self, record_id: str) -> Dict[str, Any]:
        index = self._index_of(record_id)
        if index is None:
            raise NotFoundError(record_id, self.name)
        return self._records[index]

    def create(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """Assign a new id to ``record`` and insert it at the head of the store.

        Any ``id`` already present in ``record`` is replaced.

        Returns:
            dict: The stored record including its id.
        """
        new_record = {**record, 'id': self.next_id()}
        self._records = [new_record] + self._records
        logger.info(f"Created {new_record['id']} in {self.name}")
        return new_record

    def update(self, record_id: str, patch: Dict[str, Any]) -> Dict[str, Any]:
        """Shallow-merge ``patch`` into the record with ``record_id``.

        The id itself cannot be changed by a patch.

        Raises:
            NotFoundError: If no record has ``record_id``.
        """
        index = self._index_of(record_id)
        if index is None:
            raise NotFoundError(record_id, self.name)

        updated = {**self._records[index], **patch, 'id': record_id}
        records = list(self._records)
        records[index] = updated
        self._records = records
        logger.info(f"Updated {record_id} in {self.name}: {sorted(patch)}")
        return updated

    def delete(self, record_id: str) -> Dict[str, Any]:
        """Remove the record with ``record_id`` and return it.

        Raises:
            NotFoundError: If no record has ``record_id``.
        """
        index = self._index_of(record_id)
        if index is None:
            raise NotFoundError(record_id, self.name)

        removed = self._records[index]
        self._records = self._records[:index] + self._records[index + 1:]
        logger.info(f"Deleted {record_id} from {self.name}")
        return removed

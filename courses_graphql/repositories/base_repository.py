"""
Base Repository Class
Provides the in-memory collection operations shared by all record kinds
"""

import threading
from typing import Any, Callable, Dict, List, Optional

from ..config.logger import LoggerMixin
from ..monitoring.metrics import RECORD_MUTATIONS_TOTAL

Record = Dict[str, Any]
Predicate = Callable[[Record], bool]

ID_STRATEGIES = ('sequence', 'length')


class BaseRepository(LoggerMixin):
    """
    In-memory ordered collection of records of one kind

    Provides:
    - Live listing and linear-scan lookups
    - Append and predicate-based removal
    - Identifier allocation
    """

    kind = 'records'

    def __init__(self, records: Optional[List[Record]] = None, id_strategy: str = 'sequence'):
        """
        Initialize base repository

        Args:
            records: Initial records, kept in insertion order
            id_strategy: 'sequence' (monotonic counter) or 'length' (count + 1)
        """
        if id_strategy not in ID_STRATEGIES:
            self.log_error(f"Rejected id strategy {id_strategy!r}, expected one of {ID_STRATEGIES}")
            raise ValueError(f"Unknown id strategy: {id_strategy!r}")

        self._records: List[Record] = list(records or [])
        self.id_strategy = id_strategy
        self._lock = threading.Lock()
        self._next_id = max((r['id'] for r in self._records), default=0) + 1
        self.log_info(f"Initialized {self.__class__.__name__} with {len(self._records)} {self.kind}")

    # ============================================
    # READ OPERATIONS
    # ============================================

    def list_all(self) -> List[Record]:
        """
        Get the live collection

        Returns:
            The repository's own list, later mutations are visible through it
        """
        return self._records

    def find_first(self, predicate: Predicate) -> Optional[Record]:
        """
        Find the first record matching a predicate

        Args:
            predicate: Callable evaluated against each record in order

        Returns:
            First matching record or None
        """
        for record in self._records:
            if predicate(record):
                return record
        return None

    def find_by_id(self, id: Any) -> Optional[Record]:
        """
        Find record by ID

        Args:
            id: Record ID, None never matches

        Returns:
            Record dictionary or None
        """
        record = self.find_first(lambda r: r['id'] == id)
        self.log_debug(f"Lookup {self.kind} id={id}: {'hit' if record else 'miss'}")
        return record

    def count(self) -> int:
        return len(self._records)

    # ============================================
    # WRITE OPERATIONS
    # ============================================

    def append(self, record: Record) -> Record:
        """Append a record; the caller is responsible for its id"""
        with self._lock:
            self._append_locked(record)
        return record

    def remove_where(self, predicate: Predicate) -> List[Record]:
        """
        Remove every record matching a predicate

        Args:
            predicate: Callable evaluated against each record

        Returns:
            The live collection after removal
        """
        with self._lock:
            before = len(self._records)
            self._records[:] = [r for r in self._records if not predicate(r)]
            removed = before - len(self._records)

        if removed:
            RECORD_MUTATIONS_TOTAL.labels(kind=self.kind, action='delete').inc(removed)
        self.log_info(f"Removed {removed} {self.kind}, {len(self._records)} remaining")
        return self._records

    def create(self, data: Record) -> Record:
        """
        Allocate an id for data and append it

        Args:
            data: Record fields without id

        Returns:
            The created record
        """
        with self._lock:
            record = {'id': self._allocate_id_locked(), **data}
            self._append_locked(record)

        RECORD_MUTATIONS_TOTAL.labels(kind=self.kind, action='create').inc()
        self.log_info(f"Created {self.kind} id={record['id']}")
        return record

    def delete(self, id: Any) -> List[Record]:
        """
        Delete records by ID

        Args:
            id: Record ID

        Returns:
            The remaining collection
        """
        return self.remove_where(lambda r: r['id'] == id)

    def _allocate_id_locked(self) -> int:
        if self.id_strategy == 'length':
            return len(self._records) + 1
        new_id = self._next_id
        self._next_id += 1
        return new_id

    def _append_locked(self, record: Record):
        self._records.append(record)
        # keep the counter ahead of caller-assigned ids
        if isinstance(record.get('id'), int) and record['id'] >= self._next_id:
            self._next_id = record['id'] + 1

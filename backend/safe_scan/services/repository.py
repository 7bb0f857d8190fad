"""
Assessment Repository - Append-only store of saved assessments.

The store is a single named slot holding one JSON array, most recent first.
Every write replaces the whole array; there is no update or delete by id.
"""
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from safe_scan.logger import logger
from safe_scan.schemas.assessment import AssessmentRecord


_records_adapter = TypeAdapter(List[AssessmentRecord])


class AssessmentRepository(ABC):
    """Load-modify-store-whole repository over a single serialized slot."""
    
    @abstractmethod
    def _read_slot(self) -> Optional[bytes]:
        """Raw slot contents, or None when nothing has been stored."""
    
    @abstractmethod
    def _write_slot(self, data: bytes) -> None:
        """Replace the slot contents in one step."""
    
    @abstractmethod
    def _delete_slot(self) -> None:
        """Remove the slot."""
    
    def load_all(self) -> List[AssessmentRecord]:
        """All records, most recent first.
        
        Missing or structurally invalid state yields an empty list.
        """
        raw = self._read_slot()
        if raw is None:
            return []
        
        try:
            return _records_adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Ignoring invalid assessment store ({e.error_count()} error(s))")
            return []
    
    def append(self, record: AssessmentRecord) -> None:
        """Prepend a record and persist the full list."""
        records = [record, *self.load_all()]
        self._write_slot(_records_adapter.dump_json(records, by_alias=True))
        logger.info(f"Saved assessment {record.id} ({record.status.value}, total={record.total})")
    
    def clear(self) -> None:
        self._delete_slot()
        logger.info("Cleared all saved assessments")


class InMemoryAssessmentRepository(AssessmentRepository):
    """Process-local store, used in tests and demos."""
    
    def __init__(self, initial: Optional[bytes] = None):
        self._slot = initial
    
    def _read_slot(self) -> Optional[bytes]:
        return self._slot
    
    def _write_slot(self, data: bytes) -> None:
        self._slot = data
    
    def _delete_slot(self) -> None:
        self._slot = None


class JsonFileAssessmentRepository(AssessmentRepository):
    """Store backed by one JSON file on local disk."""
    
    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)
    
    def _read_slot(self) -> Optional[bytes]:
        try:
            return self.path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning(f"Could not read assessment store {self.path}: {e}")
            return None
    
    def _write_slot(self, data: bytes) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        
        # Write next to the target so os.replace stays on one filesystem
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=self.path.parent)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    
    def _delete_slot(self) -> None:
        self.path.unlink(missing_ok=True)

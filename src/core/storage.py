"""Persistence collaborators for the task store.

A repository exposes two operations, ``load`` and ``save``, and raises
``StorageError`` when either fails. The store turns those exceptions into
``LoadFailure`` / ``PersistFailure`` values.

The stored payload is a JSON array of task records with camelCase keys,
kept under a single key of a JSON object (a file-backed key-value store).
"""

import json
import logging
import os
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any, Protocol

from pydantic import TypeAdapter, ValidationError

from src.core.config import constants
from src.core.logging import span
from src.domain.task import TaskRecord


logger = logging.getLogger(__name__)

_TASK_LIST = TypeAdapter(list[TaskRecord])


class StorageError(Exception):
    """Raised when the task payload cannot be read, decoded or written."""


class TaskRepository(Protocol):
    """Storage interface the task store depends on."""

    def load(self) -> list[TaskRecord]: ...

    def save(self, tasks: Sequence[TaskRecord]) -> None: ...


def encode_tasks(tasks: Iterable[TaskRecord]) -> str:
    """Serialize tasks to the stored JSON payload."""
    return _TASK_LIST.dump_json(list(tasks), by_alias=True).decode(constants.STORAGE_ENCODING)


def decode_tasks(payload: str | bytes | list[Any] | None) -> list[TaskRecord]:
    """Parse a stored payload back into task records.

    Accepts the raw JSON text or an already-decoded list. ``None`` means
    nothing was ever stored.

    Raises:
        StorageError: If the payload is not valid JSON or a record is invalid
    """
    if payload is None:
        return []
    try:
        if isinstance(payload, str | bytes):
            return _TASK_LIST.validate_json(payload)
        return _TASK_LIST.validate_python(payload)
    except ValidationError as e:
        msg = f"Stored tasks are malformed: {e.error_count()} validation error(s)"
        raise StorageError(msg) from e


class InMemoryTaskRepository:
    """Repository holding the serialized payload in memory.

    Payloads go through the same codec as the file repository.
    """

    def __init__(self, payload: str | None = None):
        self.payload: str | None = payload

    @classmethod
    def from_tasks(cls, tasks: Iterable[TaskRecord]) -> "InMemoryTaskRepository":
        return cls(encode_tasks(tasks))

    def load(self) -> list[TaskRecord]:
        return decode_tasks(self.payload)

    def save(self, tasks: Sequence[TaskRecord]) -> None:
        self.payload = encode_tasks(tasks)


class JsonFileTaskRepository:
    """Repository backed by a JSON object file used as a key-value store.

    Tasks live under ``key``; other keys in the file are preserved on save.
    A file that cannot be read, or whose task list is malformed, is moved
    aside to ``<name>.corrupt`` before the first save replaces it.
    """

    def __init__(self, path: Path | str, *, key: str = "tasks"):
        self.path = Path(path)
        self.key = key

    def _read_document(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            document = json.loads(self.path.read_text(encoding=constants.STORAGE_ENCODING))
        except (OSError, UnicodeDecodeError) as e:
            msg = f"Failed to read {self.path}: {e}"
            raise StorageError(msg) from e
        except json.JSONDecodeError as e:
            msg = f"Failed to parse {self.path}: {e}"
            raise StorageError(msg) from e

        if not isinstance(document, dict):
            msg = f"Expected a JSON object in {self.path}, got {type(document).__name__}"
            raise StorageError(msg)
        return document

    def load(self) -> list[TaskRecord]:
        with span("task_repository.load"):
            document = self._read_document()
            tasks = decode_tasks(document.get(self.key))
            logger.debug(f"Loaded {len(tasks)} tasks from {self.path}")
            return tasks

    def _quarantine(self) -> Path:
        """Move the current file aside so a save never destroys unreadable data."""
        backup = self.path.with_name(self.path.name + constants.CORRUPT_FILE_SUFFIX)
        counter = 1
        while backup.exists():
            backup = self.path.with_name(f"{self.path.name}{constants.CORRUPT_FILE_SUFFIX}.{counter}")
            counter += 1
        try:
            os.replace(self.path, backup)
        except OSError as e:
            msg = f"Failed to move unreadable {self.path} aside: {e}"
            raise StorageError(msg) from e
        logger.warning("Moved unreadable storage file %s to %s", self.path, backup)
        return backup

    def _writable_document(self) -> dict[str, Any]:
        try:
            document = self._read_document()
            decode_tasks(document.get(self.key))
        except StorageError:
            self._quarantine()
            return {}
        return document

    def save(self, tasks: Sequence[TaskRecord]) -> None:
        with span("task_repository.save"):
            document = self._writable_document()

            document[self.key] = [task.to_payload() for task in tasks]
            tmp_path = self.path.with_name(self.path.name + constants.TEMP_FILE_SUFFIX)
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                tmp_path.write_text(
                    json.dumps(document, indent=constants.STORAGE_INDENT),
                    encoding=constants.STORAGE_ENCODING,
                )
                os.replace(tmp_path, self.path)
            except OSError as e:
                tmp_path.unlink(missing_ok=True)
                msg = f"Failed to write {self.path}: {e}"
                raise StorageError(msg) from e

            logger.debug(f"Saved {len(tasks)} tasks to {self.path}")

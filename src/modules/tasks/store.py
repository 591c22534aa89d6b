"""Task store: the owned, ordered task collection and its persistence hook."""

import logging
from collections.abc import Callable, Collection

from src.core.config import Settings, settings as default_settings
from src.core.errors import InvalidStatusTransition, LoadFailure, PersistFailure
from src.core.logging import log_with_task_context, span
from src.core.storage import StorageError, TaskRepository
from src.domain.task import SortMode, TaskRecord, TaskStatus
from src.models.service_models import LoadResult, StoreResult
from src.modules.tasks import sorting, state_machine


logger = logging.getLogger(__name__)

SnapshotListener = Callable[[tuple[TaskRecord, ...]], None]


class TaskStore:
    """Ordered collection of task records, newest first.

    Every mutation is applied in memory, published to subscribers, then
    saved through the repository. Save failures are reported in the result
    and never roll back the in-memory change.
    """

    def __init__(self, repository: TaskRepository, *, settings: Settings | None = None):
        self._repository = repository
        self._settings = settings or default_settings
        self._tasks: list[TaskRecord] = []
        self._listeners: list[SnapshotListener] = []

    # -------------------- reads --------------------

    def snapshot(self) -> tuple[TaskRecord, ...]:
        """Current records in store order."""
        return tuple(self._tasks)

    def get(self, task_id: str) -> TaskRecord | None:
        return next((task for task in self._tasks if task.id == task_id), None)

    def view(
        self,
        mode: SortMode | str | None = SortMode.NONE,
        *,
        statuses: Collection[TaskStatus] | None = None,
        query: str | None = None,
    ) -> list[TaskRecord]:
        """Filter then order the current records for display."""
        filtered = sorting.filter_tasks(self._tasks, statuses=statuses, query=query)
        return sorting.order_tasks(filtered, mode, undated_first=self._settings.undated_tasks_first)

    def __len__(self) -> int:
        return len(self._tasks)

    # -------------------- subscriptions --------------------

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Call ``listener`` with each new snapshot. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self) -> tuple[TaskRecord, ...]:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
        return snapshot

    # -------------------- persistence --------------------

    def _save(self) -> StoreResult:
        snapshot = self.snapshot()
        try:
            self._repository.save(snapshot)
        except StorageError as e:
            logger.warning("Failed to save tasks: %s", e)
            return StoreResult(snapshot=snapshot, error=PersistFailure(reason=str(e)), saved=False)
        return StoreResult(snapshot=snapshot, saved=True)

    def load(self) -> LoadResult:
        """Replace the collection with the repository contents.

        On any failure the current collection is kept and a LoadFailure returned.
        """
        with span("task_store.load"):
            try:
                loaded = self._repository.load()
            except StorageError as e:
                logger.error("Failed to load tasks: %s", e)
                return LoadResult(snapshot=self.snapshot(), error=LoadFailure(reason=str(e)))

            seen: set[str] = set()
            for task in loaded:
                if task.id in seen:
                    logger.error("Failed to load tasks: duplicate task id %s", task.id)
                    return LoadResult(
                        snapshot=self.snapshot(),
                        error=LoadFailure(reason=f"Duplicate task id in storage: {task.id}"),
                    )
                seen.add(task.id)

            self._tasks = list(loaded)
            logger.info(f"Loaded {len(self._tasks)} tasks")
            return LoadResult(snapshot=self._publish())

    def retry_save(self) -> StoreResult:
        """Save the current collection again, e.g. after a PersistFailure."""
        with span("task_store.retry_save"):
            return self._save()

    # -------------------- mutations --------------------

    def create(self, task: TaskRecord) -> StoreResult:
        """Prepend a validated record and save.

        Raises:
            ValueError: If a record with the same ID is already stored
        """
        with span("task_store.create"):
            if self.get(task.id) is not None:
                msg = f"Task {task.id} already exists"
                raise ValueError(msg)

            self._tasks.insert(0, task)
            self._publish()
            log_with_task_context(logger, "info", "Task created", task_id=task.id, title=task.title)
            return self._save()

    def delete(self, task_id: str) -> StoreResult:
        """Remove the record with ``task_id`` if present, then save."""
        with span("task_store.delete"):
            remaining = [task for task in self._tasks if task.id != task_id]
            if len(remaining) != len(self._tasks):
                self._tasks = remaining
                self._publish()
                log_with_task_context(logger, "info", "Task deleted", task_id=task_id)
            else:
                log_with_task_context(logger, "debug", "Delete ignored, task not found", task_id=task_id)
            return self._save()

    def set_status(self, task_id: str, status: TaskStatus) -> StoreResult:
        """Change the status of ``task_id`` in place, then save.

        An unknown ID leaves the collection unchanged but still saves. A
        rejected transition returns InvalidStatusTransition without saving.
        Moving back to New is rejected in either mode; strict mode also
        rejects leaving Completed or Cancelled.
        """
        with span("task_store.set_status"):
            status = TaskStatus(status)
            for index, task in enumerate(self._tasks):
                if task.id != task_id:
                    continue
                try:
                    updated = state_machine.apply_status(
                        task, status, strict=self._settings.strict_status_transitions
                    )
                except ValueError:
                    log_with_task_context(
                        logger, "info", "Status change rejected", task_id=task_id, current=task.status, requested=status
                    )
                    return StoreResult(
                        snapshot=self.snapshot(),
                        error=InvalidStatusTransition(task_id=task_id, current=task.status, requested=status),
                    )
                self._tasks[index] = updated
                self._publish()
                log_with_task_context(logger, "info", "Task status changed", task_id=task_id, status=status)
                break
            else:
                log_with_task_context(logger, "debug", "Status change ignored, task not found", task_id=task_id)
            return self._save()

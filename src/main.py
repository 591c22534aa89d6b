"""taskkeeper - personal task tracker core."""

import logging

from src.core.config import Settings, settings as default_settings
from src.core.logging import configure_logfire
from src.core.storage import JsonFileTaskRepository, TaskRepository
from src.models.service_models import LoadResult
from src.modules.tasks.store import TaskStore


logger = logging.getLogger(__name__)


def create_task_store(
    settings: Settings | None = None,
    repository: TaskRepository | None = None,
    *,
    configure_logging: bool = True,
) -> tuple[TaskStore, LoadResult]:
    """Build the task store and perform the startup load.

    Args:
        settings: Settings to use (defaults to the global instance)
        repository: Persistence collaborator; a JsonFileTaskRepository at
            settings.storage_path is created when omitted
        configure_logging: Configure Logfire before loading

    Returns:
        The store and the outcome of the initial load. A failed load leaves
        the store empty and usable.
    """
    active = settings or default_settings
    if configure_logging:
        configure_logfire(active)

    if repository is None:
        repository = JsonFileTaskRepository(active.require_storage_path(), key=active.storage_key)

    store = TaskStore(repository, settings=active)
    result = store.load()
    if result.ok:
        logger.info("startup_load", extra={"status": "ok", "task_count": len(result.snapshot)})
    else:
        logger.warning("startup_load", extra={"status": "failed", "error": result.error.reason})
    return store, result

"""
Task operations with ownership checks

Every operation receives the caller explicitly. Only the owner of a task
may remove it or change its flags; the private flag only affects who can
see a task, never who can delete it.
"""

import logging
from typing import List
from errors import NotAuthorized, TaskNotFound
from models import Task, utcnow
from repository import TaskRepository
from schemas import Caller

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, repository: TaskRepository):
        self.repository = repository

    def insert(self, caller: Caller, text: str) -> int:
        """
        Create a task owned by the caller

        Args:
            caller: Identity of the invoking user
            text: Task text

        Returns:
            Id of the new task

        Raises:
            NotAuthorized: If the caller is not logged in
        """
        if not caller.is_authenticated:
            logger.warning("Rejected insert from anonymous caller")
            raise NotAuthorized("You must be logged in to add tasks")

        task = self.repository.insert(Task(
            text=text,
            created_at=utcnow(),
            owner=caller.user_id,
            username=caller.username or caller.user_id,
            checked=False,
            private=False
        ))

        logger.info("Task %s inserted by %s", task.id, caller.user_id)
        return task.id

    def remove(self, caller: Caller, task_id: int) -> None:
        self._owned_task(caller, task_id, "remove")
        self.repository.delete(task_id)
        logger.info("Task %s removed by %s", task_id, caller.user_id)

    def set_checked(self, caller: Caller, task_id: int, checked: bool) -> None:
        self._owned_task(caller, task_id, "check")
        self.repository.update(task_id, checked=checked)
        logger.info("Task %s checked=%s by %s", task_id, checked, caller.user_id)

    def set_private(self, caller: Caller, task_id: int, private: bool) -> None:
        self._owned_task(caller, task_id, "change privacy of")
        self.repository.update(task_id, private=private)
        logger.info("Task %s private=%s by %s", task_id, private, caller.user_id)

    def list_visible(self, caller: Caller, hide_checked: bool = False) -> List[Task]:
        """Tasks the caller may see: all public ones and their own private ones"""
        return self.repository.list_visible(caller.user_id, hide_checked=hide_checked)

    def count_incomplete(self, caller: Caller) -> int:
        return self.repository.count_incomplete(caller.user_id)

    def _owned_task(self, caller: Caller, task_id: int, action: str) -> Task:
        # Anonymous callers get not-authorized even for unknown ids.
        if not caller.is_authenticated:
            logger.warning("Rejected %s on task %s from anonymous caller", action, task_id)
            raise NotAuthorized(f"You must be logged in to {action} tasks")

        task = self.repository.get(task_id)
        if not task:
            raise TaskNotFound(f"Task {task_id} not found")

        if task.owner != caller.user_id:
            logger.warning(
                "Rejected %s on task %s: caller %s is not the owner",
                action, task_id, caller.user_id
            )
            raise NotAuthorized(f"Only the owner can {action} this task")

        return task

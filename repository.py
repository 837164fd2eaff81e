from sqlmodel import Session, select, func, or_
from typing import Any, List, Optional
from models import Task
from schemas import MAX_TASK_ID


class TaskRepository:
    """
    Narrow storage interface for tasks

    The service only talks to the database through these methods, so
    nothing outside this module builds queries.
    """

    def __init__(self, session: Session):
        self.session = session

    def insert(self, task: Task) -> Task:
        self.session.add(task)
        self.session.commit()
        self.session.refresh(task)
        return task

    def get(self, task_id: int) -> Optional[Task]:
        # Ids outside the INTEGER column range cannot match a row
        if not 1 <= task_id <= MAX_TASK_ID:
            return None
        return self.session.get(Task, task_id)

    def update(self, task_id: int, **fields: Any) -> Optional[Task]:
        """
        Set fields on a task

        Returns:
            The updated task, or None if no task has that id
        """
        task = self.get(task_id)
        if not task:
            return None

        for name, value in fields.items():
            setattr(task, name, value)

        self.session.add(task)
        self.session.commit()
        self.session.refresh(task)
        return task

    def delete(self, task_id: int) -> bool:
        task = self.get(task_id)
        if not task:
            return False

        self.session.delete(task)
        self.session.commit()
        return True

    def _where(self, query, filters: dict):
        for name, value in filters.items():
            query = query.where(getattr(Task, name) == value)
        return query

    def find(self, **filters: Any) -> List[Task]:
        """Tasks whose fields equal the given values"""
        query = self._where(select(Task), filters)
        return list(self.session.exec(query).all())

    def count(self, **filters: Any) -> int:
        query = self._where(select(func.count()).select_from(Task), filters)
        return self.session.exec(query).one()

    def list_visible(
        self,
        user_id: Optional[str],
        hide_checked: bool = False
    ) -> List[Task]:
        """Public tasks plus the user's own private ones, newest first"""
        query = select(Task).where(self._visible_to(user_id))

        if hide_checked:
            query = query.where(Task.checked == False)  # noqa: E712

        query = query.order_by(Task.created_at.desc(), Task.id.desc())
        return list(self.session.exec(query).all())

    def count_incomplete(self, user_id: Optional[str]) -> int:
        query = (
            select(func.count())
            .select_from(Task)
            .where(self._visible_to(user_id))
            .where(Task.checked == False)  # noqa: E712
        )
        return self.session.exec(query).one()

    @staticmethod
    def _visible_to(user_id: Optional[str]):
        if not user_id:
            return Task.private == False  # noqa: E712
        return or_(Task.private == False, Task.owner == user_id)  # noqa: E712

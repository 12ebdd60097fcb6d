# apps/goals/application/use_cases.py
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional
from apps.goals.domain.entities import GoalEntity
from apps.goals.domain.services import validate_parent
from apps.goals.ports.repositories import IGoalRepository
from apps.reports.models import UserActivity
from apps.reports.services import ActivityLogger


class GoalNotFound(LookupError):
    pass


@dataclass
class GoalInput:
    title: str
    user_id: int
    description: str = ""
    parent_id: Optional[int] = None
    order: int = 0
    content: Dict[str, Any] = field(default_factory=dict)


# Pola JSON, które klient może zmienić -> pola encji
UPDATABLE_FIELDS = {
    'title': 'title',
    'description': 'description',
    'parentId': 'parent_id',
    'active': 'active',
    'order': 'order',
    'content': 'content',
}


class CreateGoalUseCase:
    def __init__(self, repository: IGoalRepository):
        self.repository = repository

    def execute(self, input_dto: GoalInput) -> GoalEntity:
        title = (input_dto.title or "").strip()
        if not title:
            raise ValueError("Goal title cannot be empty")

        parent = None
        if input_dto.parent_id is not None:
            parent = self.repository.get_for_user(input_dto.parent_id, input_dto.user_id)
            if parent is None:
                raise ValueError("Parent goal not found")
        validate_parent(None, parent)

        goal = GoalEntity(
            id=None,
            title=title,
            description=input_dto.description or "",
            parent_id=input_dto.parent_id,
            order=input_dto.order,
            content=input_dto.content,
        )

        return self.repository.save(goal, user_id=input_dto.user_id)


class UpdateGoalUseCase:
    def __init__(self, repository: IGoalRepository):
        self.repository = repository

    def execute(self, goal_id: int, user_id: int, changes: Dict[str, Any], partial: bool = True) -> GoalEntity:
        goal = self.repository.get_for_user(goal_id, user_id)
        if goal is None:
            raise GoalNotFound(goal_id)

        if not partial and 'title' not in changes:
            raise ValueError("Goal title is required")

        updates = {
            UPDATABLE_FIELDS[key]: value
            for key, value in changes.items()
            if key in UPDATABLE_FIELDS
        }

        if 'title' in updates:
            updates['title'] = (updates['title'] or "").strip()
            if not updates['title']:
                raise ValueError("Goal title cannot be empty")

        if 'description' in updates:
            updates['description'] = updates['description'] or ""

        if 'parent_id' in updates and updates['parent_id'] != goal.parent_id:
            parent = None
            if updates['parent_id'] is not None:
                parent = self.repository.get_for_user(updates['parent_id'], user_id)
                if parent is None:
                    raise ValueError("Parent goal not found")
            validate_parent(goal.id, parent, has_children=self.repository.has_sub_goals(goal.id))

        updated = self.repository.save(replace(goal, **updates))
        ActivityLogger.log_for_user_id(user_id, UserActivity.ActivityType.GOAL_UPDATED, {'goalId': goal.id})
        return updated


class DeleteGoalUseCase:
    def __init__(self, repository: IGoalRepository):
        self.repository = repository

    def execute(self, goal_id: int, user_id: int) -> List[int]:
        goal = self.repository.get_for_user(goal_id, user_id)
        if goal is None:
            raise GoalNotFound(goal_id)

        deleted_ids = self.repository.delete(goal.id)

        # Bez goalId - referencje do usuniętych celów są czyszczone sygnałem
        ActivityLogger.log_for_user_id(
            user_id,
            UserActivity.ActivityType.GOAL_DELETED,
            {'title': goal.title, 'deletedCount': len(deleted_ids)}
        )
        return deleted_ids

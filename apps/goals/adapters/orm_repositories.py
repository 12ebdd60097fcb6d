# apps/goals/adapters/orm_repositories.py
from typing import List, Optional
from django.db import transaction
from apps.goals.domain.entities import GoalEntity
from apps.goals.ports.repositories import IGoalRepository
from apps.goals.models import Goal as GoalModel


class DjangoGoalRepository(IGoalRepository):
    def to_entity(self, model: GoalModel) -> GoalEntity:
        """Konwertuje Model Django -> Czystą Encję."""
        return GoalEntity(
            id=model.id,
            title=model.title,
            description=model.description,
            parent_id=model.parent_id,
            active=model.active,
            order=model.order,
            content=model.content or {},
            created_at=model.created_at,
            user_id=model.user_id,
        )

    def get_for_user(self, goal_id: int, user_id: int) -> Optional[GoalEntity]:
        try:
            goal = GoalModel.objects.get(id=goal_id, user_id=user_id)
            return self.to_entity(goal)
        except GoalModel.DoesNotExist:
            return None

    def list_for_user(self, user_id: int) -> List[GoalEntity]:
        qs = GoalModel.objects.filter(user_id=user_id)
        return [self.to_entity(g) for g in qs]

    def save(self, goal: GoalEntity, user_id: int = None) -> GoalEntity:
        data = {
            'title': goal.title,
            'description': goal.description,
            'parent_id': goal.parent_id,
            'active': goal.active,
            'order': goal.order,
            'content': goal.content,
        }

        if goal.id:
            # Aktualizacja istniejącego
            GoalModel.objects.filter(id=goal.id).update(**data)
            obj = GoalModel.objects.get(id=goal.id)
        else:
            # Tworzenie nowego (wymaga user_id)
            if user_id is None:
                raise ValueError("user_id is required for creating a new goal")
            obj = GoalModel.objects.create(user_id=user_id, **data)

        return self.to_entity(obj)

    def has_sub_goals(self, goal_id: int) -> bool:
        return GoalModel.objects.filter(parent_id=goal_id).exists()

    def delete(self, goal_id: int) -> List[int]:
        with transaction.atomic():
            try:
                goal = GoalModel.objects.get(id=goal_id)
            except GoalModel.DoesNotExist:
                return []

            # Podcele idą przez CASCADE; zbieramy ID przed usunięciem
            deleted_ids = [goal.id] + list(goal.sub_goals.values_list('id', flat=True))
            goal.delete()

        return deleted_ids

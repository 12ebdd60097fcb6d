# apps/goals/ports/repositories.py
from abc import ABC, abstractmethod
from typing import List, Optional
from apps.goals.domain.entities import GoalEntity


class IGoalRepository(ABC):
    @abstractmethod
    def get_for_user(self, goal_id: int, user_id: int) -> Optional[GoalEntity]:
        """Zwraca cel tylko jeśli należy do usera."""
        pass

    @abstractmethod
    def list_for_user(self, user_id: int) -> List[GoalEntity]:
        pass

    @abstractmethod
    def save(self, goal: GoalEntity, user_id: int = None) -> GoalEntity:
        """Zapisuje (tworzy lub aktualizuje) cel i zwraca zaktualizowaną encję (np. z ID)."""
        pass

    @abstractmethod
    def has_sub_goals(self, goal_id: int) -> bool:
        pass

    @abstractmethod
    def delete(self, goal_id: int) -> List[int]:
        """Usuwa cel razem z podcelami. Zwraca ID wszystkich usuniętych celów."""
        pass

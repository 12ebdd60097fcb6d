# apps/goals/domain/services.py
"""
Czysta logika hierarchii celów.

Funkcje działają na wszystkim, co ma atrybuty ``id`` i ``parent_id``
(GoalEntity, model Django), więc ten sam kod obsługuje widoki serwera
i panele klienta.
"""
from typing import Iterable, List, Optional


def filter_sub_goals(goals: Iterable, main_goal: Optional[object]) -> List:
    """
    Zwraca podcele wybranego celu głównego w oryginalnej kolejności kolekcji.
    Brak wybranego celu -> pusta lista.
    """
    if main_goal is None:
        return []
    return [goal for goal in goals if goal.parent_id == main_goal.id]


def main_goals(goals: Iterable) -> List:
    """Cele bez rodzica (korzenie drzewa)."""
    return [goal for goal in goals if goal.parent_id is None]


def validate_parent(goal_id: Optional[int], parent: Optional[object], has_children: bool = False) -> None:
    """
    Sprawdza niezmienniki drzewa celów (maks. 2 poziomy).
    Rzuca ValueError przy naruszeniu.
    """
    if parent is None:
        return

    if goal_id is not None and parent.id == goal_id:
        raise ValueError("A goal cannot be its own parent")

    if parent.parent_id is not None:
        raise ValueError("Sub goals can only be nested under a main goal")

    if has_children:
        raise ValueError("A goal with sub goals cannot become a sub goal")

# webclient/panels.py
from typing import List, Optional
from urllib.parse import urlencode
from apps.goals.domain.entities import GoalEntity
from apps.goals.domain.services import filter_sub_goals, main_goals
from .api import as_query
from .auth_gate import Placeholder
from .context import SessionContext
from .query_cache import EMPTY, QueryState

GOALS_KEY = '/api/goals'


def _goals_state(context: SessionContext) -> QueryState:
    return context.cache.query(GOALS_KEY, as_query(context.client, GOALS_KEY))


def _goals(state: QueryState) -> Optional[List[GoalEntity]]:
    if state.data is None:
        return None
    # Odpowiedź inna niż lista celów traktujemy jak pustą
    if not isinstance(state.data, list):
        return []
    return [GoalEntity.from_dict(item) for item in state.data if isinstance(item, dict)]


class GoalsSidePanel:
    """Panel boczny: wybrany cel główny i jego podcele."""

    def __init__(self, context: SessionContext):
        self.context = context
        self.main_goal_id: Optional[int] = None
        self.sub_goal_id: Optional[int] = None

    def select(self, main_goal_id: Optional[int], sub_goal_id: Optional[int] = None):
        self.main_goal_id = main_goal_id
        self.sub_goal_id = sub_goal_id

    def render(self):
        state = _goals_state(self.context)
        goals = _goals(state)
        if goals is None:
            return None if state.error is not None else Placeholder()

        main_goal = next((g for g in main_goals(goals) if g.id == self.main_goal_id), None)
        if main_goal is None:
            return None

        return {
            'title': main_goal.title,
            'description': main_goal.description,
            'subGoals': [
                {'id': goal.id, 'title': goal.title, 'selected': goal.id == self.sub_goal_id}
                for goal in filter_sub_goals(goals, main_goal)
            ],
        }


class TextAnalysisPanel:
    """Poprawiony tekst i cele, które analiza w nim rozpoznała."""

    def __init__(self, context: SessionContext):
        self.context = context

    @staticmethod
    def key(text: str):
        return ('/api/analyze', text)

    def analyze(self, text: str):
        path = '/api/analyze?' + urlencode({'text': text})
        return self.context.cache.fetch(self.key(text), as_query(self.context.client, path))

    def render(self, text: str):
        if not text:
            return None

        key = self.key(text)
        if self.context.cache.get(key) == EMPTY:
            self.analyze(text)
        state = self.context.cache.get(key)

        if state.data is None:
            return None if state.error is not None else Placeholder()

        matched_ids = state.data.get('goalMatches') or []
        goals = _goals(_goals_state(self.context)) or []
        return {
            'correctedText': state.data.get('correctedText', ''),
            'matchedGoals': [goal for goal in goals if goal.id in matched_ids],
        }

# apps/goals/domain/entities.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass
class GoalEntity:
    id: Optional[int]  # None przed zapisem
    title: str
    description: str = ""
    parent_id: Optional[int] = None  # None = cel główny
    active: bool = True
    order: int = 0
    content: Dict[str, Any] = field(default_factory=dict)
    created_at: Optional[datetime] = None
    user_id: Optional[int] = None

    @property
    def is_main_goal(self) -> bool:
        return self.parent_id is None

    def to_dict(self) -> Dict[str, Any]:
        """Format JSON używany przez API (camelCase)."""
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'parentId': self.parent_id,
            'active': self.active,
            'order': self.order,
            'content': self.content,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'userId': self.user_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GoalEntity':
        created_at = data.get('createdAt')
        return cls(
            id=data.get('id'),
            title=data.get('title') or "",
            description=data.get('description') or "",
            parent_id=data.get('parentId'),
            active=data.get('active', True),
            order=data.get('order') or 0,
            content=data.get('content') or {},
            created_at=datetime.fromisoformat(created_at) if created_at else None,
            user_id=data.get('userId'),
        )

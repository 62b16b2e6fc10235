from dataclasses import dataclass
from datetime import datetime


@dataclass
class Post:
    """Сущность поста"""
    id: int
    title: str
    content: str
    published: bool
    created_at: datetime

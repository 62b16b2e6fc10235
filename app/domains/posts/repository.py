"""
Repository Interface: IPostRepository

Порт (интерфейс) хранилища постов, от которого зависит PostService.
Реализация находится в app.db.repositories.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from app.domains.posts.entities import Post


class IPostRepository(ABC):
    """Интерфейс репозитория постов. Бизнес-правил не содержит."""

    @abstractmethod
    async def create(self, data: Dict[str, Any]) -> Post:
        """
        Создать пост.

        Args:
            data: Поля нового поста (title, content)

        Returns:
            Созданный пост с присвоенными id и created_at
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Все посты по убыванию created_at."""
        pass

    @abstractmethod
    async def find_published(self) -> List[Post]:
        """Посты с published=True по убыванию created_at."""
        pass

    @abstractmethod
    async def get_by_id(self, post_id: int) -> Optional[Post]:
        """
        Найти пост по ID.

        Args:
            post_id: ID поста

        Returns:
            Пост или None
        """
        pass

    @abstractmethod
    async def update(self, post_id: int, data: Dict[str, Any]) -> Post:
        """
        Обновить поля поста. Пост должен существовать.

        Args:
            post_id: ID поста
            data: Изменяемые поля

        Returns:
            Обновлённый пост
        """
        pass

    @abstractmethod
    async def delete(self, post_id: int) -> Post:
        """
        Удалить пост. Пост должен существовать.

        Args:
            post_id: ID поста

        Returns:
            Пост в состоянии до удаления
        """
        pass

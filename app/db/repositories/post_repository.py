from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.post import Post as PostModel
from app.domains.posts.entities import Post
from app.domains.posts.repository import IPostRepository


class PostRepository(IPostRepository):
    """Репозиторий для работы с постами"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, data: Dict[str, Any]) -> Post:
        """Создание нового поста"""
        db_post = PostModel(**data)

        self.session.add(db_post)
        await self.session.commit()
        await self.session.refresh(db_post)
        return self._to_domain(db_post)

    async def find_all(self) -> List[Post]:
        """Все посты, новые первыми"""
        result = await self.session.execute(
            select(PostModel)
            .order_by(PostModel.created_at.desc(), PostModel.id.desc())
        )
        return [self._to_domain(post) for post in result.scalars().all()]

    async def find_published(self) -> List[Post]:
        """Опубликованные посты, новые первыми"""
        result = await self.session.execute(
            select(PostModel)
            .where(PostModel.published.is_(True))
            .order_by(PostModel.created_at.desc(), PostModel.id.desc())
        )
        return [self._to_domain(post) for post in result.scalars().all()]

    async def get_by_id(self, post_id: int) -> Optional[Post]:
        """Получение поста по ID"""
        result = await self.session.execute(
            select(PostModel).where(PostModel.id == post_id)
        )
        db_post = result.scalar_one_or_none()
        return self._to_domain(db_post) if db_post else None

    async def update(self, post_id: int, data: Dict[str, Any]) -> Post:
        """Частичное обновление поста.

        Если запись исчезла после проверки существования, scalar_one()
        поднимает NoResultFound.
        """
        db_post = await self._load(post_id)

        for field, value in data.items():
            setattr(db_post, field, value)

        await self.session.commit()
        await self.session.refresh(db_post)
        return self._to_domain(db_post)

    async def delete(self, post_id: int) -> Post:
        """Удаление поста, возвращает запись в состоянии до удаления"""
        db_post = await self._load(post_id)
        post = self._to_domain(db_post)

        await self.session.delete(db_post)
        await self.session.commit()
        return post

    async def _load(self, post_id: int) -> PostModel:
        result = await self.session.execute(
            select(PostModel).where(PostModel.id == post_id)
        )
        return result.scalar_one()

    def _to_domain(self, db_post: PostModel) -> Post:
        """Преобразование модели БД в доменную сущность"""
        return Post(
            id=db_post.id,
            title=db_post.title,
            content=db_post.content,
            published=db_post.published,
            created_at=db_post.created_at,
        )

import logging
from typing import List

from app.core.exceptions import PostNotFoundError
from app.domains.posts.entities import Post
from app.domains.posts.repository import IPostRepository
from app.domains.posts.schemas import PostCreate, PostUpdate

logger = logging.getLogger(__name__)


class PostService:
    """Сервис для работы с постами.

    Каждая операция над конкретным ID сначала проверяет существование
    поста и только потом обращается к изменяющему методу репозитория.
    Проверка и запись не атомарны: если пост удалён между ними,
    ошибка репозитория пробрасывается без обработки.
    """

    def __init__(self, repository: IPostRepository):
        self.repository = repository

    async def create(self, post_data: PostCreate) -> Post:
        """Создание нового поста"""
        post = await self.repository.create(post_data.model_dump())
        logger.info(f"Created post {post.id}")
        return post

    async def find_all(self) -> List[Post]:
        """Все посты, новые первыми"""
        return await self.repository.find_all()

    async def find_published(self) -> List[Post]:
        """Опубликованные посты, новые первыми"""
        return await self.repository.find_published()

    async def find_one(self, post_id: int) -> Post:
        """Получение поста по ID"""
        return await self._get_existing(post_id)

    async def update(self, post_id: int, update_data: PostUpdate) -> Post:
        """Частичное обновление поста"""
        await self._get_existing(post_id)
        post = await self.repository.update(post_id, update_data.model_dump(exclude_none=True))
        logger.info(f"Updated post {post_id}")
        return post

    async def remove(self, post_id: int) -> Post:
        """Удаление поста"""
        await self._get_existing(post_id)
        post = await self.repository.delete(post_id)
        logger.info(f"Deleted post {post_id}")
        return post

    async def publish(self, post_id: int) -> Post:
        """Публикация поста"""
        return await self._set_published(post_id, True)

    async def unpublish(self, post_id: int) -> Post:
        """Снятие поста с публикации"""
        return await self._set_published(post_id, False)

    async def _set_published(self, post_id: int, published: bool) -> Post:
        await self._get_existing(post_id)
        post = await self.repository.update(post_id, {"published": published})
        logger.info(f"Post {post_id} published={published}")
        return post

    async def _get_existing(self, post_id: int) -> Post:
        post = await self.repository.get_by_id(post_id)
        if post is None:
            logger.warning(f"Post {post_id} not found")
            raise PostNotFoundError(post_id)
        return post

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.core.db import get_db
from app.core.exceptions import PostNotFoundError
from app.db.repositories.post_repository import PostRepository
from app.domains.posts.schemas import PostCreate, PostUpdate, PostResponse
from app.domains.posts.services import PostService

router = APIRouter(prefix="/posts", tags=["posts"])


def get_post_service(db: AsyncSession = Depends(get_db)) -> PostService:
    return PostService(PostRepository(db))


@router.post("/", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    post_data: PostCreate,
    post_service: PostService = Depends(get_post_service)
):
    """Создание нового поста"""
    post = await post_service.create(post_data)
    return PostResponse.model_validate(post)


@router.get("/", response_model=List[PostResponse])
async def get_posts(post_service: PostService = Depends(get_post_service)):
    """Список всех постов, новые первыми"""
    posts = await post_service.find_all()
    return [PostResponse.model_validate(post) for post in posts]


@router.get("/published", response_model=List[PostResponse])
async def get_published_posts(post_service: PostService = Depends(get_post_service)):
    """Список опубликованных постов, новые первыми"""
    posts = await post_service.find_published()
    return [PostResponse.model_validate(post) for post in posts]


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: int,
    post_service: PostService = Depends(get_post_service)
):
    """Получение поста по ID"""
    try:
        post = await post_service.find_one(post_id)
    except PostNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return PostResponse.model_validate(post)


@router.patch("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: int,
    update_data: PostUpdate,
    post_service: PostService = Depends(get_post_service)
):
    """Частичное обновление поста"""
    try:
        post = await post_service.update(post_id, update_data)
    except PostNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return PostResponse.model_validate(post)


@router.delete("/{post_id}", response_model=PostResponse)
async def delete_post(
    post_id: int,
    post_service: PostService = Depends(get_post_service)
):
    """Удаление поста, в ответе пост в состоянии до удаления"""
    try:
        post = await post_service.remove(post_id)
    except PostNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return PostResponse.model_validate(post)


@router.patch("/{post_id}/publish", response_model=PostResponse)
async def publish_post(
    post_id: int,
    post_service: PostService = Depends(get_post_service)
):
    """Публикация поста"""
    try:
        post = await post_service.publish(post_id)
    except PostNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return PostResponse.model_validate(post)


@router.patch("/{post_id}/unpublish", response_model=PostResponse)
async def unpublish_post(
    post_id: int,
    post_service: PostService = Depends(get_post_service)
):
    """Снятие поста с публикации"""
    try:
        post = await post_service.unpublish(post_id)
    except PostNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return PostResponse.model_validate(post)

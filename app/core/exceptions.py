"""
Domain exceptions.

Ошибки бизнес-правил сервисного слоя. Ошибки хранилища (SQLAlchemy)
сюда не заворачиваются и пробрасываются как есть.
"""


class DomainException(Exception):
    """Базовое исключение домена."""
    pass


class EntityNotFoundError(DomainException):
    """Сущность не найдена."""
    pass


class PostNotFoundError(EntityNotFoundError):
    """Пост с указанным ID не существует."""

    def __init__(self, post_id: int):
        self.post_id = post_id
        super().__init__(f"Post with ID {post_id} not found")

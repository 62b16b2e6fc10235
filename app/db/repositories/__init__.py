from app.db.repositories.post_repository import PostRepository

__all__ = [
    "PostRepository",
]

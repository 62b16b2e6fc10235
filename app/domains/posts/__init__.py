from app.domains.posts.entities import Post
from app.domains.posts.repository import IPostRepository
from app.domains.posts.schemas import PostBase, PostCreate, PostUpdate, PostResponse
from app.domains.posts.services import PostService

__all__ = [
    "Post", "IPostRepository",
    "PostBase", "PostCreate", "PostUpdate", "PostResponse",
    "PostService"
]

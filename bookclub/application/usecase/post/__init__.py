"""Post use cases."""

from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase

__all__ = ["GetPostRequest", "GetPostResponse", "GetPostUseCase"]

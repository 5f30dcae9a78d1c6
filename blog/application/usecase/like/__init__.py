"""Like use cases."""

from .add_like import AddLikeRequest, AddLikeResponse, AddLikeUseCase
from .get_likes import GetLikesRequest, GetLikesResponse, GetLikesUseCase, LikeView
from .remove_like import RemoveLikeRequest, RemoveLikeResponse, RemoveLikeUseCase

__all__ = [
    "AddLikeRequest",
    "AddLikeResponse",
    "AddLikeUseCase",
    "GetLikesRequest",
    "GetLikesResponse",
    "GetLikesUseCase",
    "LikeView",
    "RemoveLikeRequest",
    "RemoveLikeResponse",
    "RemoveLikeUseCase",
]

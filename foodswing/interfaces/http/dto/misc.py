from __future__ import annotations

from .base import ResponseDTO, SuccessDTO


class BlogPostDTO(ResponseDTO):
    id: str
    title: str
    excerpt: str
    date: str
    read_time: str
    tag: str


class BlogPostListDTO(SuccessDTO):
    posts: list[BlogPostDTO]


class HealthDTO(SuccessDTO):
    timestamp: str
    database: str

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from flask import Blueprint, jsonify

from foodswing.domain.blog.posts import list_posts
from foodswing.interfaces.http.dto.misc import (BlogPostDTO, BlogPostListDTO,
                                                HealthDTO)


class MiscController:
    def __init__(self, *, database_probe: Callable[[], bool]) -> None:
        self._database_probe = database_probe

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        bp.add_url_rule("/api/blog/posts", view_func=self.blog_posts, methods=["GET"])
        return bp

    def health(self):
        ok = True
        try:
            self._database_probe()
            database = "ok"
        except Exception as exc:
            ok = False
            database = f"error: {exc}"
        status = HealthDTO(
            success=ok,
            message="FoodSwing API is running! 🍔",
            timestamp=datetime.now(UTC).isoformat(),
            database=database,
        )
        return jsonify(status.to_json())

    def blog_posts(self):
        posts = [
            BlogPostDTO(
                id=p.id,
                title=p.title,
                excerpt=p.excerpt,
                date=p.date,
                read_time=p.read_time,
                tag=p.tag,
            )
            for p in list_posts()
        ]
        return jsonify(BlogPostListDTO(posts=posts).to_json())

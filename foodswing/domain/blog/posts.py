# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Static blog feed shown on the landing page."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class BlogPost:
    id: str
    title: str
    excerpt: str
    date: str
    read_time: str
    tag: str


BLOG_POSTS: tuple[BlogPost, ...] = (
    BlogPost(
        id="comfort-food",
        title="The Science Behind Comfort Food",
        excerpt="Discover why certain foods make us feel better...",
        date="Dec 1, 2024",
        read_time="5 min read",
        tag="Psychology",
    ),
    BlogPost(
        id="stress-snacks",
        title="Smart Snacks for Stressful Days",
        excerpt="Foods that keep you steady when the deadlines pile up...",
        date="Nov 24, 2024",
        read_time="4 min read",
        tag="Wellness",
    ),
    BlogPost(
        id="celebration-eats",
        title="Eating for Excitement",
        excerpt="What to cook when you feel like celebrating...",
        date="Nov 17, 2024",
        read_time="3 min read",
        tag="Recipes",
    ),
)


def list_posts() -> list[BlogPost]:
    return list(BLOG_POSTS)

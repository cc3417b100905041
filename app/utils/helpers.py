import re
from datetime import datetime, timezone
from typing import Any, Iterable, List, Optional, Sequence, TypeVar

from app.models.blog import BlogPost, Tag

T = TypeVar("T")

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _as_aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def item_date(item: Any, primary: str = "pub_date", fallback: Optional[str] = None) -> datetime:
    """Date used to order an item; the epoch when neither field is set."""
    value = getattr(item, primary, None)
    if value is None and fallback:
        value = getattr(item, fallback, None)
    return _as_aware(value) if value is not None else EPOCH


def sort_items_by_date_desc(items: Iterable[T], primary: str = "pub_date", fallback: Optional[str] = None) -> List[T]:
    """Newest first; undated items keep their relative order at the end."""
    return sorted(items, key=lambda item: item_date(item, primary, fallback), reverse=True)


def create_slug_from_title(title: str) -> str:
    slug = re.sub(r"[^a-z0-9\s-]", "", title.lower()).strip()
    slug = re.sub(r"\s+", "-", slug)
    return re.sub(r"-+", "-", slug)


def get_all_tags(posts: Sequence[BlogPost]) -> List[Tag]:
    """Unique tags in first-seen order; names that slugify alike collapse."""
    tags: List[Tag] = []
    seen = set()
    for post in posts:
        for name in post.tags:
            if not name:
                continue
            slug = create_slug_from_title(name)
            if slug in seen:
                continue
            seen.add(slug)
            tags.append(Tag(name=name, id=slug))
    return tags


def get_posts_by_tag(posts: Sequence[BlogPost], tag_id: str) -> List[BlogPost]:
    return [
        post for post in posts
        if tag_id in {create_slug_from_title(tag) for tag in post.tags}
    ]

import json
import os

os.environ.setdefault("LOG_FILE", "")

import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import httpx
import pytest

from app.core.config import CmsConfig
from app.services.content_service import ContentService
from app.services.interaction_service import InteractionService
from app.services.strapi_client import StrapiClient

CMS_URL = "http://cms.test"
COLLECTIONS = ("blog-posts", "projects", "podcasts", "comments", "likes")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _fmt(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return "" if value is None else str(value)


class FakeStrapi:
    """
    In-memory Strapi answering the REST calls the site makes.

    Reproduces the custom controllers: comments are always stored unapproved
    with the requester IP, a session can like a post only once and a like is
    only deleted when the `sessionId` query parameter owns it.
    """

    def __init__(self):
        self.data: Dict[str, List[Dict[str, Any]]] = {name: [] for name in COLLECTIONS}
        self.requests: List[httpx.Request] = []
        self.fail_status: Optional[int] = None
        self.offline = False
        self._next_id = 1

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def _new_ids(self, prefix: str) -> Dict[str, Any]:
        entry_id = self._next_id
        self._next_id += 1
        return {"id": entry_id, "documentId": f"{prefix}{entry_id}"}

    # ---- seeding ----

    def add(self, collection: str, **fields) -> Dict[str, Any]:
        record = {**self._new_ids(collection[:3]), "createdAt": _now(), **fields}
        self.data[collection].append(record)
        return record

    def add_comment(self, post_id: str, approved: bool = True, parent: Optional[str] = None, **fields):
        return self.add(
            "comments",
            blog_post={"documentId": post_id},
            approved=approved,
            parentComment=parent,
            content=fields.pop("content", "Nice post"),
            authorName=fields.pop("authorName", "Ada"),
            authorEmail="ada@example.com",
            **fields,
        )

    def approve(self, document_id: str) -> None:
        for comment in self.data["comments"]:
            if comment["documentId"] == document_id:
                comment["approved"] = True

    # ---- http ----

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.offline:
            raise httpx.ConnectError("connection refused", request=request)
        if self.fail_status:
            return httpx.Response(self.fail_status, json={"error": {"status": self.fail_status}})

        match = re.fullmatch(r"/api/([a-z-]+)(?:/([^/]+))?", request.url.path)
        if not match or match.group(1) not in self.data:
            return httpx.Response(404, json={"error": {"status": 404, "message": "Not Found"}})
        collection, entry = match.groups()

        if request.method == "GET":
            return self._list(collection, request)
        if request.method == "POST" and collection == "comments":
            return self._create_comment(request)
        if request.method == "POST" and collection == "likes":
            return self._create_like(request)
        if request.method == "DELETE" and collection == "likes":
            return self._delete_like(entry, request)
        if request.method == "DELETE" and collection == "comments":
            return self._delete(collection, entry)
        return httpx.Response(405)

    def _matches(self, record: Dict[str, Any], key: str, value: str) -> bool:
        *path, operator = re.findall(r"\[([^\]]+)\]", key)
        current: Any = record
        for part in path:
            current = current.get(part) if isinstance(current, dict) else None
        if operator == "$eq":
            return _fmt(current) == value
        if operator == "$contains":
            return value in (current or [])
        raise AssertionError(f"unsupported operator {operator}")

    def _public(self, collection: str, record: Dict[str, Any], populate: Optional[str]) -> Dict[str, Any]:
        item = {k: v for k, v in record.items() if k not in ("blog_post", "parentComment", "ipAddress")}
        if collection == "comments" and populate in ("parentComment", "*") and record.get("parentComment"):
            parent = self._find("comments", record["parentComment"])
            if parent is not None:
                item["parentComment"] = self._public("comments", parent, None)
        if collection == "blog-posts" and populate == "*":
            item["comments"] = [
                self._public("comments", c, None)
                for c in self.data["comments"]
                if c["blog_post"]["documentId"] == record["documentId"]
            ]
            item["likes"] = [
                self._public("likes", l, None)
                for l in self.data["likes"]
                if l["blog_post"]["documentId"] == record["documentId"]
            ]
        return item

    def _find(self, collection: str, document_id: str) -> Optional[Dict[str, Any]]:
        for record in self.data[collection]:
            if record["documentId"] == document_id:
                return record
        return None

    def _list(self, collection: str, request: httpx.Request) -> httpx.Response:
        params = request.url.params
        records = list(self.data[collection])
        for key, value in params.multi_items():
            if key.startswith("filters"):
                records = [r for r in records if self._matches(r, key, value)]

        sort = params.get("sort")
        if sort:
            for expression in reversed(sort.split(",")):
                field, _, direction = expression.partition(":")
                records.sort(key=lambda r: (r.get(field) is None, r.get(field) or 0), reverse=direction == "desc")

        meta: Dict[str, Any] = {}
        if "pagination[page]" in params:
            page = int(params["pagination[page]"])
            size = int(params["pagination[pageSize]"])
            total = len(records)
            records = records[(page - 1) * size: page * size]
            meta["pagination"] = {
                "page": page,
                "pageSize": size,
                "pageCount": -(-total // size),
                "total": total,
            }

        populate = params.get("populate")
        return httpx.Response(200, json={"data": [self._public(collection, r, populate) for r in records], "meta": meta})

    def _create_comment(self, request: httpx.Request) -> httpx.Response:
        data = json.loads(request.content)["data"]
        record = {
            **self._new_ids("com"),
            "content": data["content"],
            "authorName": data["authorName"],
            "authorEmail": data["authorEmail"],
            "authorWebsite": data.get("authorWebsite"),
            "blog_post": {"documentId": data["blog_post"]},
            "parentComment": data.get("parentComment"),
            "createdAt": _now(),
            # moderation gate
            "approved": False,
            "ipAddress": "127.0.0.1",
        }
        self.data["comments"].append(record)
        return httpx.Response(201, json={"data": self._public("comments", record, None), "meta": {}})

    def _create_like(self, request: httpx.Request) -> httpx.Response:
        data = json.loads(request.content)["data"]
        for like in self.data["likes"]:
            if like["sessionId"] == data["sessionId"] and like["blog_post"]["documentId"] == data["blog_post"]:
                return httpx.Response(
                    400, json={"error": {"status": 400, "message": "You have already liked this post"}}
                )
        record = {
            **self._new_ids("lik"),
            "sessionId": data["sessionId"],
            "blog_post": {"documentId": data["blog_post"]},
            "ipAddress": "127.0.0.1",
            "createdAt": _now(),
        }
        self.data["likes"].append(record)
        return httpx.Response(201, json={"data": self._public("likes", record, None), "meta": {}})

    def _delete_like(self, entry: str, request: httpx.Request) -> httpx.Response:
        session_id = request.url.params.get("sessionId")
        for like in self.data["likes"]:
            if str(like["id"]) == entry and like["sessionId"] == session_id:
                self.data["likes"].remove(like)
                return httpx.Response(204)
        return httpx.Response(
            404, json={"error": {"status": 404, "message": "Like not found or you do not have permission to delete it"}}
        )

    def _delete(self, collection: str, entry: str) -> httpx.Response:
        record = self._find(collection, entry)
        if record is None:
            return httpx.Response(404, json={"error": {"status": 404}})
        self.data[collection].remove(record)
        return httpx.Response(204)


@pytest.fixture
def fake_cms() -> FakeStrapi:
    return FakeStrapi()


@pytest.fixture
def cms_config() -> CmsConfig:
    return CmsConfig(base_url=CMS_URL, api_token="test-token", timeout=5.0)


@pytest.fixture
def strapi_client(cms_config, fake_cms) -> StrapiClient:
    return StrapiClient(cms_config, transport=fake_cms.transport)


@pytest.fixture
def content_service(strapi_client) -> ContentService:
    return ContentService(strapi_client)


@pytest.fixture
def interaction_service(strapi_client) -> InteractionService:
    return InteractionService(strapi_client)

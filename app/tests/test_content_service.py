import pytest


def _seed_posts(fake_cms):
    fake_cms.add("blog-posts", title="Old", slug="old", pubDate="2024-01-01T00:00:00Z",
                 draft=False, tags=["python"])
    fake_cms.add("blog-posts", title="New", slug="new", pubDate="2024-06-01T00:00:00Z",
                 draft=False, tags=["python", "astro"], image={"url": {"url": "/uploads/new.png"}})
    fake_cms.add("blog-posts", title="Draft", slug="draft", pubDate="2024-07-01T00:00:00Z",
                 draft=True, tags=["secret"])


@pytest.mark.asyncio
async def test_get_all_blog_posts_skips_drafts_newest_first(content_service, fake_cms):
    _seed_posts(fake_cms)

    posts = await content_service.get_all_blog_posts()

    assert [p.slug for p in posts] == ["new", "old"]
    assert posts[0].image.url == "http://cms.test/uploads/new.png"
    params = fake_cms.requests[-1].url.params
    assert params["populate"] == "*"
    assert params["sort"] == "pubDate:desc"
    assert params["filters[draft][$eq]"] == "false"


@pytest.mark.asyncio
async def test_blog_post_counts_come_from_populated_relations(content_service, fake_cms):
    post = fake_cms.add("blog-posts", title="Hi", slug="hi", pubDate="2024-01-01T00:00:00Z", draft=False)
    fake_cms.add_comment(post["documentId"], approved=True)
    fake_cms.add_comment(post["documentId"], approved=False)
    fake_cms.add("likes", sessionId="s1", blog_post={"documentId": post["documentId"]})

    fetched = await content_service.get_blog_post_by_slug("hi")

    assert fetched.comments_count == 1
    assert fetched.likes_count == 1


@pytest.mark.asyncio
async def test_get_blog_post_by_slug_missing_returns_none(content_service, fake_cms):
    _seed_posts(fake_cms)
    assert await content_service.get_blog_post_by_slug("nope") is None


@pytest.mark.asyncio
async def test_get_blog_posts_by_tag_uses_contains_filter(content_service, fake_cms):
    _seed_posts(fake_cms)

    posts = await content_service.get_blog_posts_by_tag("astro")

    assert [p.slug for p in posts] == ["new"]
    assert fake_cms.requests[-1].url.params["filters[tags][$contains]"] == "astro"


@pytest.mark.asyncio
async def test_get_tag_names_is_sorted_and_unique(content_service, fake_cms):
    _seed_posts(fake_cms)
    assert await content_service.get_tag_names() == ["astro", "python"]


@pytest.mark.asyncio
async def test_paginated_blog_posts_carry_pagination(content_service, fake_cms):
    _seed_posts(fake_cms)

    result = await content_service.get_paginated_blog_posts(page=2, page_size=1)

    assert [p.slug for p in result.posts] == ["old"]
    assert result.pagination.page == 2
    assert result.pagination.page_size == 1
    assert result.pagination.page_count == 2
    assert result.pagination.total == 2


@pytest.mark.asyncio
async def test_recent_blog_posts_are_limited(content_service, fake_cms):
    _seed_posts(fake_cms)
    posts = await content_service.get_recent_blog_posts(limit=1)
    assert [p.slug for p in posts] == ["new"]


@pytest.mark.asyncio
async def test_reads_fail_soft_when_cms_errors(content_service, fake_cms):
    fake_cms.fail_status = 500

    assert await content_service.get_all_blog_posts() == []
    assert await content_service.get_blog_post_by_slug("x") is None
    assert await content_service.get_tag_names() == []
    paginated = await content_service.get_paginated_blog_posts()
    assert paginated.posts == []
    assert paginated.pagination is None
    assert await content_service.get_all_projects() == []
    assert await content_service.get_podcast_by_slug("x") is None


@pytest.mark.asyncio
async def test_reads_fail_soft_when_cms_unreachable(content_service, fake_cms):
    fake_cms.offline = True
    assert await content_service.get_featured_projects() == []
    assert await content_service.get_all_podcasts() == []


@pytest.mark.asyncio
async def test_projects_sorted_by_order_then_newest(content_service, fake_cms):
    fake_cms.add("projects", title="B", slug="b", order=2, createdAt="2024-01-01T00:00:00Z")
    fake_cms.add("projects", title="A", slug="a", order=1, createdAt="2023-01-01T00:00:00Z", featured=True)
    fake_cms.add("projects", title="C", slug="c", order=2, createdAt="2024-05-01T00:00:00Z")

    projects = await content_service.get_all_projects()

    assert [p.slug for p in projects] == ["a", "c", "b"]
    assert fake_cms.requests[-1].url.params["sort"] == "order:asc,createdAt:desc"

    featured = await content_service.get_featured_projects()
    assert [p.slug for p in featured] == ["a"]
    assert fake_cms.requests[-1].url.params["filters[featured][$eq]"] == "true"


@pytest.mark.asyncio
async def test_project_by_slug_and_pagination(content_service, fake_cms):
    fake_cms.add("projects", title="Only", slug="only", order=1, status="completed")

    project = await content_service.get_project_by_slug("only")
    assert project.title == "Only"
    assert await content_service.get_project_by_slug("missing") is None

    page = await content_service.get_paginated_projects(page=1, page_size=9)
    assert page.pagination.total == 1
    assert [p.slug for p in page.projects] == ["only"]


@pytest.mark.asyncio
async def test_podcasts(content_service, fake_cms):
    fake_cms.add("podcasts", title="Ep 1", slug="ep-1", audioUrl="/a1.mp3", pubDate="2024-01-01T00:00:00Z")
    fake_cms.add("podcasts", title="Ep 2", slug="ep-2", audioUrl="/a2.mp3", pubDate="2024-02-01T00:00:00Z",
                 featured=True)

    assert [p.slug for p in await content_service.get_all_podcasts()] == ["ep-2", "ep-1"]
    assert [p.slug for p in await content_service.get_featured_podcasts()] == ["ep-2"]
    assert (await content_service.get_podcast_by_slug("ep-1")).audio_url == "/a1.mp3"

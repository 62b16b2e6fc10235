"""
Integration tests для HTTP API постов.
"""

import pytest


async def _create(client, title="A", content="B"):
    response = await client.post("/posts/", json={"title": title, "content": content})
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_root(client):
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json()["health"] == "/health"


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["database"] == "ok"


@pytest.mark.asyncio
async def test_create_post(client):
    post = await _create(client)

    assert post["title"] == "A"
    assert post["content"] == "B"
    assert post["published"] is False
    assert isinstance(post["id"], int)
    assert post["created_at"]


@pytest.mark.asyncio
async def test_create_post_validation_error(client):
    response = await client.post("/posts/", json={"title": "", "content": "B"})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_posts_newest_first(client):
    first = await _create(client, title="first")
    second = await _create(client, title="second")

    response = await client.get("/posts/")

    assert response.status_code == 200
    assert [p["id"] for p in response.json()] == [second["id"], first["id"]]


@pytest.mark.asyncio
async def test_list_published_posts(client):
    draft = await _create(client, title="draft")
    post = await _create(client, title="live")
    await client.patch(f"/posts/{post['id']}/publish")

    response = await client.get("/posts/published")

    ids = [p["id"] for p in response.json()]
    assert response.status_code == 200
    assert ids == [post["id"]]
    assert draft["id"] not in ids


@pytest.mark.asyncio
async def test_update_post_partial(client):
    post = await _create(client, title="Old", content="Body")

    response = await client.patch(f"/posts/{post['id']}", json={"title": "New"})

    assert response.status_code == 200
    assert response.json()["title"] == "New"

    fetched = (await client.get(f"/posts/{post['id']}")).json()
    assert fetched["title"] == "New"
    assert fetched["content"] == "Body"
    assert fetched["published"] is False
    assert fetched["created_at"] == post["created_at"]


@pytest.mark.asyncio
async def test_update_rejects_published_field(client):
    post = await _create(client)

    response = await client.patch(f"/posts/{post['id']}", json={"published": True})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_publish_is_idempotent(client):
    post = await _create(client)

    first = await client.patch(f"/posts/{post['id']}/publish")
    second = await client.patch(f"/posts/{post['id']}/publish")

    assert first.json()["published"] is True
    assert second.json()["published"] is True


@pytest.mark.asyncio
async def test_unpublish(client):
    post = await _create(client)
    await client.patch(f"/posts/{post['id']}/publish")

    response = await client.patch(f"/posts/{post['id']}/unpublish")

    assert response.status_code == 200
    assert response.json()["published"] is False


@pytest.mark.asyncio
@pytest.mark.parametrize("method,path", [
    ("GET", "/posts/999"),
    ("PATCH", "/posts/999"),
    ("DELETE", "/posts/999"),
    ("PATCH", "/posts/999/publish"),
    ("PATCH", "/posts/999/unpublish"),
])
async def test_missing_post_returns_404(client, method, path):
    kwargs = {"json": {"title": "x"}} if method == "PATCH" and path == "/posts/999" else {}

    response = await client.request(method, path, **kwargs)

    assert response.status_code == 404
    assert response.json()["detail"] == "Post with ID 999 not found"


@pytest.mark.asyncio
async def test_non_integer_id_is_rejected(client):
    response = await client.get("/posts/abc")

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_post_lifecycle_scenario(client):
    created = await _create(client, title="A", content="B")
    post_id = created["id"]
    assert created["published"] is False

    published = (await client.patch(f"/posts/{post_id}/publish")).json()
    assert published["published"] is True

    fetched = (await client.get(f"/posts/{post_id}")).json()
    assert fetched == published

    removed = await client.delete(f"/posts/{post_id}")
    assert removed.status_code == 200
    assert removed.json() == published

    assert (await client.get(f"/posts/{post_id}")).status_code == 404

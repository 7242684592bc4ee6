import pytest


pytestmark = pytest.mark.asyncio


async def _create_article(client, headers, title, category="Python", published=True, **extra):
    payload = {"title": title, "content": f"# {title}", "category": category, "published": published}
    payload.update(extra)
    return await client.post("/api/v1/wiki", headers=headers, json=payload)


async def test_article_crud_flow(client, admin_headers):
    create_resp = await _create_article(client, admin_headers, "Async Generators")
    assert create_resp.status_code == 201, create_resp.text
    article = create_resp.json()["data"]
    assert article["slug"] == "async-generators"
    assert article["category"] == "Python"
    assert "excerpt" not in article

    dup = await _create_article(client, admin_headers, "async generators!", category="Other")
    assert dup.status_code == 409

    update = await client.put(
        f"/api/v1/wiki/{article['id']}",
        headers=admin_headers,
        json={"category": "Advanced Python", "tags": ["asyncio"]},
    )
    assert update.status_code == 200
    assert update.json()["data"]["category"] == "Advanced Python"
    assert update.json()["data"]["slug"] == "async-generators"

    blank_category = await client.put(
        "/api/v1/wiki/async-generators", headers=admin_headers, json={"category": "  "}
    )
    assert blank_category.status_code == 422

    delete = await client.delete("/api/v1/wiki/async-generators", headers=admin_headers)
    assert delete.status_code == 200
    again = await client.delete("/api/v1/wiki/async-generators", headers=admin_headers)
    assert again.status_code == 404


async def test_article_requires_category(client, admin_headers):
    resp = await client.post(
        "/api/v1/wiki", headers=admin_headers, json={"title": "No Category", "content": "x"}
    )
    assert resp.status_code == 422


async def test_listing_order_and_visibility(client, admin_headers):
    await _create_article(client, admin_headers, "Zeta", category="Go")
    await _create_article(client, admin_headers, "Alpha", category="Python")
    await _create_article(client, admin_headers, "Beta", category="Go")
    await _create_article(client, admin_headers, "Draft", category="Go", published=False)

    public = (await client.get("/api/v1/wiki")).json()["data"]
    assert [(i["category"], i["title"]) for i in public["items"]] == [
        ("Go", "Beta"), ("Go", "Zeta"), ("Python", "Alpha"),
    ]

    admin_view = (await client.get("/api/v1/wiki", headers=admin_headers)).json()["data"]
    assert admin_view["total"] == 4


async def test_categories_count_published_only(client, admin_headers):
    await _create_article(client, admin_headers, "One", category="Python")
    two = (await _create_article(client, admin_headers, "Two", category="Python")).json()["data"]
    await _create_article(client, admin_headers, "Three", category="Go")
    await _create_article(client, admin_headers, "Four", category="Rust", published=False)

    resp = await client.get("/api/v1/wiki/categories")
    assert resp.status_code == 200
    assert resp.json() == [{"name": "Go", "count": 1}, {"name": "Python", "count": 2}]

    # Unpublishing decrements the category count
    await client.put(f"/api/v1/wiki/{two['id']}", headers=admin_headers, json={"published": False})
    resp = await client.get("/api/v1/wiki/categories")
    assert resp.json() == [{"name": "Go", "count": 1}, {"name": "Python", "count": 1}]


async def test_category_page_is_case_insensitive(client, admin_headers):
    await _create_article(client, admin_headers, "Upper", category="Python")
    await _create_article(client, admin_headers, "Lower", category="python")
    await _create_article(client, admin_headers, "Elsewhere", category="Go")

    resp = await client.get("/api/v1/wiki/category/PYTHON")
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["category"] == "PYTHON"
    assert sorted(i["title"] for i in data["items"]) == ["Lower", "Upper"]
    # The sidebar index still groups case-sensitively
    assert [c["name"] for c in data["categories"]] == ["Go", "Python", "python"]


async def test_draft_article_hidden_from_readers(client, admin_headers, user_headers):
    await _create_article(client, admin_headers, "Work In Progress", published=False)
    assert (await client.get("/api/v1/wiki/work-in-progress")).status_code == 404
    assert (await client.get("/api/v1/wiki/work-in-progress", headers=user_headers)).status_code == 404
    assert (await client.get("/api/v1/wiki/work-in-progress", headers=admin_headers)).status_code == 200


async def test_markdown_preview(client):
    resp = await client.post("/api/v1/markdown", json={"markdown": "**bold**"})
    assert resp.status_code == 200
    assert resp.json()["htmlContent"] == "<p><strong>bold</strong></p>"

    empty = await client.post("/api/v1/markdown", json={"markdown": "  "})
    assert empty.status_code == 422

    mdx = await client.post("/api/v1/markdown", json={"markdown": "x", "format": "mdx"})
    assert mdx.status_code == 422
    assert mdx.json()["detail"]["code"] == "UNSUPPORTED_FORMAT"


async def test_healthz(client):
    resp = await client.get("/healthz")
    assert resp.json() == {"ok": True}

"""Article publishing, listing, partial updates and deletion."""

from conftest import PNG_BYTES, PNG_DATA_URL
from lawgan.core.images import decode_image


def test_publish_then_list_contains_article_once(client, publish_article):
    article = publish_article(summary="  Short  ", author="Desk")

    assert article["published"] is True
    assert article["is_breaking"] is False
    assert article["summary"] == "Short"

    articles = client.get("/articles").get_json()["articles"]
    assert [a["slug"] for a in articles].count("tenancy-reform") == 1


def test_publish_requires_fields(client, auth_headers):
    response = client.post("/articles/publish", json={"title": "Only a title"}, headers=auth_headers)
    assert response.status_code == 400
    assert response.get_json()["message"] == "Title, slug, content, and category are required."


def test_publish_rejects_unknown_category(client, auth_headers):
    response = client.post("/articles/publish", json={
        "title": "t", "slug": "s", "content": "c", "category": "sports",
    }, headers=auth_headers)
    assert response.status_code == 400
    assert response.get_json()["message"].startswith("Invalid category.")


def test_duplicate_slug_is_case_insensitive(client, auth_headers, publish_article):
    publish_article(slug="Big-Story")

    response = client.post("/articles/publish", json={
        "title": "Again", "slug": "big-story", "content": "c", "category": "law",
    }, headers=auth_headers)

    assert response.status_code == 409
    assert response.get_json()["message"] == "Slug already in use."


def test_publish_with_image_returns_data_url(client, publish_article):
    article = publish_article(image_base64=PNG_DATA_URL)

    assert article["image_url"].startswith("data:image/png;base64,")
    assert decode_image(article["image_url"]).binary == PNG_BYTES


def test_publish_with_invalid_image(client, auth_headers):
    response = client.post("/articles/publish", json={
        "title": "t", "slug": "s", "content": "c", "category": "law",
        "image_base64": "data:image/png;base64,!!!",
    }, headers=auth_headers)
    assert response.status_code == 400
    assert response.get_json()["message"] == "Invalid image data."


def test_category_listing_accepts_hyphenated_name(client, publish_article):
    publish_article(slug="abroad", category="Foreign Affairs")
    publish_article(slug="home-news", category="law")

    response = client.get("/articles/category/foreign-affairs")

    assert response.status_code == 200
    slugs = [a["slug"] for a in response.get_json()["articles"]]
    assert slugs == ["abroad"]


def test_category_listing_rejects_unknown(client):
    assert client.get("/articles/category/sports").status_code == 400


def test_list_is_newest_first(client, publish_article):
    publish_article(slug="first")
    publish_article(slug="second")
    publish_article(slug="third")

    slugs = [a["slug"] for a in client.get("/articles").get_json()["articles"]]
    assert slugs == ["third", "second", "first"]


def test_edit_by_slug_changes_only_supplied_fields(client, auth_headers, publish_article):
    original = publish_article()

    response = client.patch("/articles/edit", json={
        "slug": "tenancy-reform", "title": "Updated headline",
    }, headers=auth_headers)

    assert response.status_code == 200
    article = response.get_json()["article"]
    assert article["title"] == "Updated headline"
    assert article["content"] == original["content"]
    assert article["category"] == original["category"]


def test_edit_renames_slug(client, auth_headers, publish_article):
    original = publish_article()

    response = client.patch("/articles/edit", json={
        "id": original["id"], "new_slug": "tenancy-reform-2",
    }, headers=auth_headers)

    assert response.status_code == 200
    assert response.get_json()["article"]["slug"] == "tenancy-reform-2"


def test_edit_rename_to_taken_slug_conflicts(client, auth_headers, publish_article):
    publish_article(slug="taken")
    other = publish_article(slug="mine")

    response = client.patch("/articles/edit", json={
        "id": other["id"], "newSlug": "taken",
    }, headers=auth_headers)

    assert response.status_code == 409


def test_edit_null_on_required_field_rejected(client, auth_headers, publish_article):
    article = publish_article()

    response = client.patch("/articles/edit", json={"id": article["id"], "title": None}, headers=auth_headers)

    assert response.status_code == 400
    assert response.get_json()["message"] == "Title cannot be empty."


def test_edit_null_clears_optional_field(client, auth_headers, publish_article):
    article = publish_article(summary="Has a summary")

    response = client.patch("/articles/edit", json={"id": article["id"], "summary": None}, headers=auth_headers)

    assert response.status_code == 200
    assert response.get_json()["article"]["summary"] is None


def test_edit_without_fields(client, auth_headers, publish_article):
    article = publish_article()

    response = client.patch("/articles/edit", json={"id": article["id"]}, headers=auth_headers)

    assert response.status_code == 400
    assert response.get_json()["message"] == "No fields provided to update."


def test_edit_without_identifier(client, auth_headers):
    response = client.patch("/articles/edit", json={"title": "x"}, headers=auth_headers)
    assert response.status_code == 400
    assert response.get_json()["message"] == "Article id or slug is required."


def test_edit_missing_article(client, auth_headers):
    response = client.patch("/articles/edit", json={"id": 999, "title": "x"}, headers=auth_headers)
    assert response.status_code == 404


def test_unpublish_hides_from_public_pages(client, auth_headers, publish_article):
    article = publish_article(title="Hidden soon")
    client.patch("/articles/edit", json={"id": article["id"], "published": False}, headers=auth_headers)

    assert client.get("/article/tenancy-reform").status_code == 404
    assert b"Hidden soon" not in client.get("/law").data
    # The API list still carries it for the dashboard
    assert len(client.get("/articles").get_json()["articles"]) == 1


def test_delete_article(client, auth_headers, publish_article):
    article = publish_article()

    response = client.delete("/articles/delete", json={"id": article["id"]}, headers=auth_headers)

    assert response.status_code == 200
    assert response.get_json()["deleted"] == {"id": article["id"]}
    assert client.get("/articles").get_json()["articles"] == []


def test_delete_missing_article(client, auth_headers):
    response = client.delete("/articles/delete", json={"id": 404}, headers=auth_headers)
    assert response.status_code == 404
    assert response.get_json()["message"] == "Article not found."


def test_delete_requires_id(client, auth_headers):
    response = client.delete("/articles/delete", json={}, headers=auth_headers)
    assert response.status_code == 400


def test_oversized_image_payload_is_rejected(client, auth_headers):
    import base64
    big_image = "data:image/png;base64," + base64.b64encode(b"\x00" * (400 * 1024)).decode("ascii")

    response = client.post("/articles/publish", json={
        "title": "t", "slug": "big", "content": "c", "category": "law", "image_base64": big_image,
    }, headers=auth_headers)

    assert response.status_code == 413
    assert "message" in response.get_json()
    assert client.get("/articles").get_json()["articles"] == []

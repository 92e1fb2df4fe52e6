"""Public front-end pages and the admin dashboard shell."""

from conftest import PNG_DATA_URL


def test_home_page_renders_breaking_and_fallback_quotes(client, publish_article):
    publish_article(title="Breaking verdict", slug="verdict", is_breaking=True)

    response = client.get("/")

    assert response.status_code == 200
    assert b"Breaking verdict" in response.data
    assert b"Justice delayed is justice denied" in response.data


def test_home_page_uses_stored_quotes(client, auth_headers):
    client.post("/quotes/publish", json={"title": "Print the truth", "author": "Desk"}, headers=auth_headers)

    response = client.get("/")

    assert b"Print the truth" in response.data
    assert b"Justice delayed is justice denied" not in response.data


def test_category_page_lists_only_its_category(client, publish_article):
    publish_article(title="Treaty signed", slug="treaty", category="foreign affairs")
    publish_article(title="Budget vote", slug="budget", category="politics")

    response = client.get("/foreign-affairs")

    assert response.status_code == 200
    assert b"Treaty signed" in response.data
    assert b"Budget vote" not in response.data


def test_category_page_shows_advert_for_its_page(client, auth_headers):
    client.post("/advertisements/publish", json={
        "url": "https://firm.test", "owner": "Firm LLP", "page": "law", "image_base64": PNG_DATA_URL,
    }, headers=auth_headers)

    assert b"Firm LLP" in client.get("/law").data
    assert b"Firm LLP" not in client.get("/politics").data


def test_article_page_with_related(client, publish_article):
    publish_article(title="Main story", slug="main-story")
    publish_article(title="Related story", slug="related-story")
    publish_article(title="Other desk", slug="other", category="reviews")

    response = client.get("/article/main-story")

    assert response.status_code == 200
    assert b"Second paragraph." in response.data
    assert b"Related story" in response.data
    assert b"Other desk" not in response.data


def test_missing_article_page_is_404(client):
    response = client.get("/article/nope")
    assert response.status_code == 404
    assert b"Article not found." in response.data


def test_editorial_board_page_uses_defaults(client, auth_headers):
    client.post("/editorial-boards/publish", json={"name": "Nameonly Person"}, headers=auth_headers)

    response = client.get("/editorial-board")

    assert b"Nameonly Person" in response.data
    assert b"Editorial Board Member" in response.data
    assert b"Member of the editorial board" in response.data


def test_about_page_lists_executives(client, auth_headers):
    client.post("/executives/publish", json={"name": "Exec One", "position": "Publisher"}, headers=auth_headers)

    response = client.get("/about")

    assert response.status_code == 200
    assert b"Exec One" in response.data


def test_unknown_page_renders_html_404(client):
    response = client.get("/no-such-page")
    assert response.status_code == 404
    assert b"Page not found." in response.data


def test_admin_dashboard_shell(client):
    response = client.get("/admin")

    assert response.status_code == 200
    assert b'data-max-quotes="6"' in response.data
    assert b"/admin/static/dashboard.js" in response.data


def test_dashboard_script_is_served(client):
    response = client.get("/admin/static/dashboard.js")

    assert response.status_code == 200
    assert b"adminToken" in response.data
    assert b"articleDraft" in response.data
    response.close()


def test_empty_section_still_shows_its_advert(client, auth_headers):
    client.post("/advertisements/publish", json={
        "url": "https://party.test", "owner": "Party Press", "page": "politics", "image_base64": PNG_DATA_URL,
    }, headers=auth_headers)

    response = client.get("/politics")

    assert b"No articles in this section yet." in response.data
    assert b"Party Press" in response.data


def test_section_without_adverts_shows_placeholder(client):
    response = client.get("/reviews")
    assert response.data.count(b"Advertisement space available") == 3


def test_adverts_rotate_across_three_slots(client, auth_headers):
    for owner in ("Alpha Ads", "Beta Ads"):
        client.post("/advertisements/publish", json={
            "url": "https://ads.test", "owner": owner, "page": "law", "image_base64": PNG_DATA_URL,
        }, headers=auth_headers)

    data = client.get("/law").data

    # Newest first: slots pick Beta, Alpha, Beta
    assert data.count(b"Sponsored by Beta Ads") == 2
    assert data.count(b"Sponsored by Alpha Ads") == 1
    assert b"Advertisement space available" not in data

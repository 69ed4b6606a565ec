"""Pages — routed views over HTTP, /github gated on its loader."""

import httpx


async def test_home_lists_navigation(client):
    response = await client.get("/")
    assert response.status_code == 200
    assert "/user/:userid" in response.json()["navigation"]


async def test_static_pages(client):
    assert (await client.get("/about")).json()["view"] == "about"
    assert (await client.get("/contact")).json()["view"] == "contact"


async def test_user_page_extracts_param(client):
    body = (await client.get("/user/john")).json()
    assert body["userid"] == "john"
    assert body["route"]["current_url"] == "/user/john"


async def test_user_page_without_id_is_404(client):
    assert (await client.get("/user/")).status_code == 404


async def test_github_renders_profile_after_load(client, upstream):
    response = await client.get("/github")
    assert response.status_code == 200
    body = response.json()
    assert body["display_name"] == "The Octocat"
    assert body["stats"] == {"repositories": 8, "followers": 100, "following": 9, "gists": 8}
    assert upstream["paths"] == ["/users/octocat"]


async def test_github_upstream_404_is_502(client, upstream):
    upstream["respond"] = lambda request: httpx.Response(404, json={"message": "Not Found"})
    response = await client.get("/github")
    assert response.status_code == 502
    assert response.json()["error"]["code"] == "NETWORK_ERROR"
    assert len(upstream["paths"]) == 1


async def test_github_malformed_body_is_502(client, upstream):
    upstream["respond"] = lambda request: httpx.Response(200, json={"login": "octocat"})
    response = await client.get("/github")
    assert response.status_code == 502


async def test_route_table_listing(client):
    routes = (await client.get("/api/v1/routes")).json()["routes"]
    assert [r["pattern"] for r in routes] == ["/", "/about", "/contact", "/user/:userid", "/github"]
    assert routes[3]["params"] == ["userid"]
    assert routes[4]["loader"] == "github_info"

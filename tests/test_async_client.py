"""
Tests for the async client.
"""

import asyncio

import httpx
import pytest

from conftest import JWT, NOT_FOUND, PASSWORD, USERNAME, FakeDockerHub
from dockerhub.async_client import AsyncDockerHubClient
from dockerhub.context import CallContext
from dockerhub.exceptions import CancelledError, NotFoundError, TransportError
from dockerhub.types import GroupMember, PersonalAccessToken


@pytest.mark.asyncio
async def test_login_precedes_request(hub: FakeDockerHub, async_client: AsyncDockerHubClient) -> None:
    hub.add("GET", "/repositories/myorg/lora/", body={"namespace": "myorg", "name": "lora", "is_private": True})

    repo = await async_client.repositories.get("myorg/lora")

    assert repo.name == "lora"
    assert repo.private is True
    assert [r.url.path for r in hub.requests] == ["/v2/users/login/", "/v2/repositories/myorg/lora/"]
    assert hub.last.headers["Authorization"] == f"JWT {JWT}"


@pytest.mark.asyncio
async def test_missing_group(async_client: AsyncDockerHubClient) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        await async_client.groups.get("myorg", "unknowngroupnamehere")

    assert str(exc_info.value) == NOT_FOUND


@pytest.mark.asyncio
async def test_cancelled_context_sends_nothing(hub: FakeDockerHub, async_client: AsyncDockerHubClient) -> None:
    ctx = CallContext()
    ctx.cancel()

    with pytest.raises(CancelledError):
        await async_client.access_tokens.create("ci", ["repo:read"], ctx=ctx)

    assert hub.requests == []


@pytest.mark.asyncio
async def test_cancel_between_login_and_request(
    hub: FakeDockerHub, async_client: AsyncDockerHubClient
) -> None:
    ctx = CallContext()
    hub.on_login = ctx.cancel

    with pytest.raises(CancelledError):
        await async_client.repositories.delete("myorg/lora", ctx=ctx)

    assert hub.api_requests == []


@pytest.mark.asyncio
async def test_task_cancellation_aborts_call() -> None:
    started = asyncio.Event()

    async def slow(request: httpx.Request) -> httpx.Response:
        started.set()
        await asyncio.sleep(60)
        return httpx.Response(200, json={"token": JWT})

    async with httpx.AsyncClient(transport=httpx.MockTransport(slow)) as http:
        client = AsyncDockerHubClient(username=USERNAME, password=PASSWORD, http_client=http)
        task = asyncio.create_task(client.repositories.get("myorg/lora"))
        await started.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task


@pytest.mark.asyncio
async def test_association_payload(hub: FakeDockerHub, async_client: AsyncDockerHubClient) -> None:
    hub.add(
        "POST",
        "/repositories/myorg/lora/groups/",
        status=201,
        body={"group_id": 7, "group_name": "devs", "permission": "write"},
    )

    association = await async_client.repository_groups.create("myorg/lora", 7, "devs", "write")

    assert hub.last_json() == {
        "group_id": 7,
        "groupid": 7,
        "group_name": "devs",
        "groupname": "devs",
        "permission": "write",
    }
    assert association.permission == "write"


@pytest.mark.asyncio
async def test_injected_client_is_not_closed() -> None:
    async with httpx.AsyncClient() as http:
        async with AsyncDockerHubClient(username=USERNAME, password=PASSWORD, http_client=http):
            pass

        assert not http.is_closed


REPOSITORY = {"namespace": "myorg", "name": "lora", "description": "", "is_private": True}
GROUP = {"id": 7, "name": "devs", "description": "new"}
ASSOCIATION = {"group_id": 7, "group_name": "devs", "permission": "admin"}
MEMBERS = {"count": 1, "next": None, "results": [{"username": "bob", "full_name": "Bob"}]}
TOKEN = {"uuid": "abc", "token_label": "ci", "scopes": ["repo:read"]}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("call", "method", "path", "status", "response", "payload"),
    [
        (
            lambda c: c.repositories.update("myorg/lora", private=True),
            "PATCH", "/repositories/myorg/lora/", 200, REPOSITORY, {"is_private": True},
        ),
        (
            lambda c: c.groups.update("myorg", 7, description="new"),
            "PATCH", "/orgs/myorg/groups/7/", 200, GROUP, {"description": "new"},
        ),
        (
            lambda c: c.repository_groups.update("myorg/lora", 7, "devs", "admin"),
            "PATCH",
            "/repositories/myorg/lora/groups/7/",
            200,
            ASSOCIATION,
            {"group_id": 7, "groupid": 7, "group_name": "devs", "groupname": "devs", "permission": "admin"},
        ),
        (
            lambda c: c.groups.list_members("myorg", "devs"),
            "GET", "/orgs/myorg/groups/devs/members/", 200, MEMBERS, None,
        ),
        (
            lambda c: c.groups.add_member("myorg", "devs", "carol"),
            "POST", "/orgs/myorg/groups/devs/members/", 204, None, {"member": "carol"},
        ),
        (
            lambda c: c.groups.remove_member("myorg", "devs", "bob"),
            "DELETE", "/orgs/myorg/groups/devs/members/bob/", 204, None, None,
        ),
        (lambda c: c.access_tokens.get("abc"), "GET", "/access-tokens/abc", 200, TOKEN, None),
        (lambda c: c.access_tokens.delete("abc"), "DELETE", "/access-tokens/abc", 204, None, None),
    ],
    ids=[
        "repository-update",
        "group-update",
        "association-update",
        "list-members",
        "add-member",
        "remove-member",
        "token-get",
        "token-delete",
    ],
)
async def test_request_shape(
    hub: FakeDockerHub,
    async_client: AsyncDockerHubClient,
    call,
    method: str,
    path: str,
    status: int,
    response,
    payload,
) -> None:
    hub.add(method, path, status=status, body=response)

    result = await call(async_client)

    assert [r.url.path for r in hub.api_requests] == [f"/v2{path}"]
    assert hub.last.method == method
    assert hub.last.headers["Authorization"] == f"JWT {JWT}"
    if payload is None:
        assert hub.last.content == b""
    else:
        assert hub.last_json() == payload
    if response is None:
        assert result is None
    else:
        assert result is not None


@pytest.mark.asyncio
async def test_member_and_token_results_are_parsed(
    hub: FakeDockerHub, async_client: AsyncDockerHubClient
) -> None:
    hub.add("GET", "/orgs/myorg/groups/devs/members/", body=MEMBERS)
    hub.add("GET", "/access-tokens/abc", body=TOKEN)

    members = await async_client.groups.list_members("myorg", "devs")
    token = await async_client.access_tokens.get("abc")

    assert members == [GroupMember("bob", "Bob")]
    assert token == PersonalAccessToken(uuid="abc", token_label="ci", scopes=["repo:read"])


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [[], {}])
async def test_malformed_body_is_a_transport_error(
    hub: FakeDockerHub, async_client: AsyncDockerHubClient, body: object
) -> None:
    hub.add("GET", "/repositories/myorg/lora/groups/7/", body=body)

    with pytest.raises(TransportError):
        await async_client.repository_groups.get("myorg/lora", 7)


@pytest.mark.asyncio
async def test_redirect_is_followed(hub: FakeDockerHub, async_client: AsyncDockerHubClient) -> None:
    hub.add_handler(
        "GET",
        "/access-tokens/abc",
        lambda request: httpx.Response(301, headers={"Location": "https://hub.docker.com/v2/access-tokens/abc/"}),
    )
    hub.add("GET", "/access-tokens/abc/", body=TOKEN)

    token = await async_client.access_tokens.get("abc")

    assert token.uuid == "abc"
    assert hub.last.url.path == "/v2/access-tokens/abc/"

# backend/tests/test_catalog_client.py

import httpx
import pytest
import respx

from pokecatalog.catalog_client import fetch_catalog, build_catalog_url, get_catalog_client, close_catalog_client
from pokecatalog.exceptions import ResourceNotFoundError, UpstreamError, MalformedResponseError

from conftest import BASE_URL, pokemon_url


def test_build_catalog_url_relative_and_absolute():
    assert build_catalog_url("/pokemon/1") == f"{BASE_URL}/pokemon/1"
    assert build_catalog_url("pokemon/1") == f"{BASE_URL}/pokemon/1"
    absolute = "https://pokeapi.co/api/v2/pokemon-species/1/"
    assert build_catalog_url(absolute) == absolute


@pytest.mark.asyncio
@respx.mock
async def test_fetch_returns_parsed_object(catalog_client):
    respx.get(pokemon_url("pikachu")).mock(return_value=httpx.Response(200, json={"id": 25, "name": "pikachu"}))

    payload = await fetch_catalog("/pokemon/pikachu", client=catalog_client)

    assert payload == {"id": 25, "name": "pikachu"}


@pytest.mark.asyncio
@respx.mock
async def test_fetch_passes_query_params(catalog_client):
    route = respx.get(f"{BASE_URL}/pokemon", params={"offset": "20", "limit": "10"}).mock(
        return_value=httpx.Response(200, json={"count": 0, "results": []})
    )

    await fetch_catalog("/pokemon", params={"offset": 20, "limit": 10}, client=catalog_client)

    assert route.called


@pytest.mark.asyncio
@respx.mock
async def test_404_is_not_found(catalog_client):
    respx.get(pokemon_url("missingno")).mock(return_value=httpx.Response(404, text="Not Found"))

    with pytest.raises(ResourceNotFoundError) as exc_info:
        await fetch_catalog("/pokemon/missingno", client=catalog_client)

    assert exc_info.value.status_code == 404
    assert exc_info.value.url == pokemon_url("missingno")


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [400, 429, 500, 503])
@respx.mock
async def test_other_statuses_are_upstream_errors(catalog_client, status_code):
    respx.get(pokemon_url(1)).mock(return_value=httpx.Response(status_code))

    with pytest.raises(UpstreamError) as exc_info:
        await fetch_catalog("/pokemon/1", client=catalog_client)

    assert exc_info.value.status_code == status_code


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [httpx.ConnectError, httpx.ReadTimeout])
@respx.mock
async def test_transport_failures_are_upstream_errors(catalog_client, error):
    respx.get(pokemon_url(1)).mock(side_effect=error)

    with pytest.raises(UpstreamError) as exc_info:
        await fetch_catalog("/pokemon/1", client=catalog_client)

    assert exc_info.value.status_code is None


@pytest.mark.asyncio
@respx.mock
async def test_unparsable_body_is_malformed(catalog_client):
    respx.get(pokemon_url(1)).mock(return_value=httpx.Response(200, text="<html>oops</html>"))

    with pytest.raises(MalformedResponseError):
        await fetch_catalog("/pokemon/1", client=catalog_client)


@pytest.mark.asyncio
@respx.mock
async def test_non_object_body_is_malformed(catalog_client):
    respx.get(pokemon_url(1)).mock(return_value=httpx.Response(200, json=[1, 2, 3]))

    with pytest.raises(MalformedResponseError):
        await fetch_catalog("/pokemon/1", client=catalog_client)


@pytest.mark.asyncio
async def test_invalid_url_is_malformed(catalog_client):
    with pytest.raises(MalformedResponseError) as exc_info:
        await fetch_catalog("http://[::1", client=catalog_client)

    assert exc_info.value.url == "http://[::1"


@pytest.mark.asyncio
async def test_shared_client_is_reused_until_closed():
    first = await get_catalog_client()
    try:
        assert await get_catalog_client() is first
    finally:
        await close_catalog_client()

    assert first.is_closed
    second = await get_catalog_client()
    try:
        assert second is not first
        assert not second.is_closed
    finally:
        await close_catalog_client()


@pytest.mark.asyncio
async def test_closing_twice_is_harmless():
    await get_catalog_client()
    await close_catalog_client()
    await close_catalog_client()

# backend/pokecatalog/catalog_client.py

import httpx
import logging
from typing import Optional, Dict, Any

from .config import settings
from .exceptions import ResourceNotFoundError, UpstreamError, MalformedResponseError

logger = logging.getLogger(__name__)

# Pooled client used when a resolver isn't handed one; (re)created on first use
_shared_client: Optional[httpx.AsyncClient] = None

async def get_catalog_client() -> httpx.AsyncClient:
    """Returns the pooled catalog client, sized so one fan-out can keep all its connections alive."""
    global _shared_client
    if _shared_client is None or _shared_client.is_closed:
        _shared_client = httpx.AsyncClient(
            timeout=httpx.Timeout(settings.request_timeout_seconds, connect=settings.connect_timeout_seconds),
            follow_redirects=True,
            limits=httpx.Limits(
                max_connections=settings.max_connections,
                max_keepalive_connections=settings.max_concurrent_requests,
            ),
        )
        logger.debug(f"Opened pooled catalog client for {settings.pokeapi_base_url}")
    return _shared_client

async def close_catalog_client():
    global _shared_client
    client, _shared_client = _shared_client, None
    if client is not None and not client.is_closed:
        await client.aclose()
        logger.debug("Closed pooled catalog client")

def build_catalog_url(endpoint: str) -> str:
    """Resolves a relative endpoint against the configured base URL; absolute URLs pass through."""
    if endpoint.startswith("http"):
        return endpoint
    if not endpoint.startswith('/'):
        endpoint = '/' + endpoint
    return f"{settings.pokeapi_base_url.rstrip('/')}{endpoint}"

async def fetch_catalog(
    endpoint: str,
    params: Optional[Dict[str, Any]] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> Dict[str, Any]:
    """
    Fetches and parses one catalog resource.

    Args:
        endpoint: Path relative to the base URL (e.g. "/pokemon/pikachu") or a full
            URL as found in catalog references.
        params: Optional query parameters.
        client: httpx client to use; the shared one is used when omitted.

    Returns:
        The decoded JSON object.

    Raises:
        ResourceNotFoundError: the catalog answered 404.
        UpstreamError: any other non-2xx status, a timeout or a transport failure.
        MalformedResponseError: 2xx but the body isn't a JSON object, or the URL itself is invalid.
    """
    if client is None:
        client = await get_catalog_client()
    url = build_catalog_url(endpoint)

    logger.debug(f"Fetching data from catalog: {url} params={params}")
    try:
        response = await client.get(url, params=params)
        response.raise_for_status() # Raise an exception for 4xx or 5xx status codes
    except httpx.TimeoutException as e:
        logger.error(f"Request timed out for catalog endpoint: {url}")
        raise UpstreamError(f"Timed out fetching {url}", url=url) from e
    except httpx.HTTPStatusError as e:
        status_code = e.response.status_code
        if status_code == 404:
            logger.warning(f"Resource not found at {url!r}")
            raise ResourceNotFoundError(f"No catalog resource at {url}", url=url, status_code=404) from e
        logger.error(f"HTTP error occurred: {status_code} {e.response.reason_phrase} for url {url!r}")
        raise UpstreamError(f"Catalog returned {status_code} for {url}", url=url, status_code=status_code) from e
    except httpx.InvalidURL as e:
        # Catalog references carry absolute URLs, so a broken one is bad catalog data
        logger.error(f"Unusable catalog URL {url!r}: {e}")
        raise MalformedResponseError(f"Catalog URL {url!r} is invalid: {e}", url=url) from e
    except httpx.HTTPError as e:
        logger.error(f"An error occurred while requesting {url!r}: {e}")
        raise UpstreamError(f"Transport failure fetching {url}: {e}", url=url) from e

    try:
        payload = response.json()
    except ValueError as e:
        logger.error(f"Unparsable body from {url!r}: {e}")
        raise MalformedResponseError(f"Body of {url} is not valid JSON", url=url, status_code=response.status_code) from e
    if not isinstance(payload, dict):
        raise MalformedResponseError(f"Body of {url} is not a JSON object", url=url, status_code=response.status_code)

    logger.debug(f"Successfully fetched data from {url}, status: {response.status_code}")
    return payload

# backend/pokecatalog/catalog_data.py

import logging
from typing import List, Optional, Union

import httpx

from .config import settings, CATEGORY_MEMBER_LIMIT
from .catalog_client import fetch_catalog
from .evolution import resolve_chain_url
from .exceptions import CatalogError, ResourceNotFoundError, InvalidKeyError
from .fanout import gather_all, gather_tolerant
from .mappers import parse_record, to_summary, to_stats, to_detail
from .models import PokemonSummary, PokemonDetail, PokemonPage, EvolutionStage
from .records import BasePokemon, BaseSpecies, NamedAPIResource, PokemonIndexPage, TypeMembership

logger = logging.getLogger(__name__)

# --- Helpers ---
def _normalize_key(pokemon_id_or_name: Union[int, str]) -> str:
    """Turns a positive ID or a name into the path segment PokeAPI expects."""
    if isinstance(pokemon_id_or_name, bool):
        raise InvalidKeyError(f"Invalid Pokémon key: {pokemon_id_or_name!r}")
    if isinstance(pokemon_id_or_name, int):
        if pokemon_id_or_name <= 0:
            raise InvalidKeyError(f"Pokémon ID must be positive, got {pokemon_id_or_name}")
        return str(pokemon_id_or_name)
    key = str(pokemon_id_or_name).strip().lower()
    if not key:
        raise InvalidKeyError("Pokémon name must not be blank")
    return key

async def _fetch_pokemon_summary(resource: NamedAPIResource, client: Optional[httpx.AsyncClient]) -> PokemonSummary:
    """Fetches the record a list/type reference points at and projects it to a summary."""
    payload = await fetch_catalog(resource.url, client=client)
    return to_summary(payload, resource.url)

async def _fetch_evolution_chain(species: BaseSpecies, client: Optional[httpx.AsyncClient]) -> List[EvolutionStage]:
    """Best effort: any catalog failure here degrades to an empty chain."""
    chain_url = species.evolution_chain_url
    if chain_url is None:
        logger.info(f"Species '{species.name}' has no usable evolution chain reference.")
        return []
    try:
        return await resolve_chain_url(chain_url, client=client)
    except CatalogError as evo_err:
        logger.warning(f"Could not fetch/process evolution chain from {chain_url}: {evo_err}")
        return []

# --- Resolvers ---
async def get_pokemon_detail_data(
    pokemon_id_or_name: Union[int, str],
    client: Optional[httpx.AsyncClient] = None,
) -> PokemonDetail:
    """
    Resolves the full detail projection of one Pokémon.

    Args:
        pokemon_id_or_name: Pokémon ID (positive int) or name (any case).
        client: httpx client to use; the shared one is used when omitted.

    Returns:
        A PokemonDetail. Its evolution_chain is empty when the chain can't be resolved.

    Raises:
        InvalidKeyError: the key is not a positive ID or a non-blank name.
        ResourceNotFoundError: no such Pokémon (or species).
        UpstreamError / MalformedResponseError: the Pokémon or species fetch failed.
    """
    identifier_str = _normalize_key(pokemon_id_or_name)
    endpoint = f"/pokemon/{identifier_str}"
    logger.info(f"Fetching Pokémon detail data for '{identifier_str}'...")

    base_pokemon = parse_record(BasePokemon, await fetch_catalog(endpoint, client=client), endpoint)
    # Reject a bad primary record before spending requests on species and chain
    stats = to_stats(base_pokemon, endpoint)
    species_payload = await fetch_catalog(base_pokemon.species.url, client=client)
    base_species = parse_record(BaseSpecies, species_payload, base_pokemon.species.url)

    evolution_chain = await _fetch_evolution_chain(base_species, client)

    detail = to_detail(base_pokemon, stats, evolution_chain, endpoint)
    logger.info(f"Successfully combined details for '{identifier_str}' ({len(evolution_chain)} evolution stages).")
    return detail

async def get_pokemon_page_data(
    offset: int = 0,
    limit: Optional[int] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> PokemonPage:
    """
    Fetches one page of the national index with a summary for every entry.

    All-or-nothing: if any entry fails to resolve the whole page fails, so
    page size and ordering stay exact for pagination.
    """
    if limit is None:
        limit = settings.default_page_limit
    if offset < 0:
        raise InvalidKeyError(f"offset must be >= 0, got {offset}")
    if limit < 1:
        raise InvalidKeyError(f"limit must be >= 1, got {limit}")

    endpoint = "/pokemon"
    logger.info(f"Fetching Pokémon page offset={offset} limit={limit}...")
    index_payload = await fetch_catalog(endpoint, params={"offset": offset, "limit": limit}, client=client)
    index_page = parse_record(PokemonIndexPage, index_payload, endpoint)

    items = await gather_all(index_page.results, lambda ref: _fetch_pokemon_summary(ref, client))
    logger.info(f"Resolved {len(items)} Pokémon for page offset={offset} (total {index_page.count}).")
    return PokemonPage(items=items, total=index_page.count)

async def get_pokemon_by_type_data(
    type_name: str,
    client: Optional[httpx.AsyncClient] = None,
) -> List[PokemonSummary]:
    """
    Summaries for the first CATEGORY_MEMBER_LIMIT members of a type.

    Members that fail to resolve are dropped; survivors keep membership order.
    An unknown type raises ResourceNotFoundError.
    """
    type_key = str(type_name).strip().lower()
    if not type_key:
        raise InvalidKeyError("Type name must not be blank")

    endpoint = f"/type/{type_key}"
    membership = parse_record(TypeMembership, await fetch_catalog(endpoint, client=client), endpoint)
    members = [slot.pokemon for slot in membership.pokemon[:CATEGORY_MEMBER_LIMIT]]
    logger.info(f"Type '{type_key}' has {len(membership.pokemon)} members, resolving {len(members)}.")

    summaries = await gather_tolerant(members, lambda ref: _fetch_pokemon_summary(ref, client))
    if len(summaries) < len(members):
        logger.warning(f"Dropped {len(members) - len(summaries)} of {len(members)} '{type_key}' members.")
    return summaries

async def search_pokemon_data(
    query: Union[int, str],
    client: Optional[httpx.AsyncClient] = None,
) -> Optional[PokemonDetail]:
    """
    Looks up a Pokémon from free-form user input.

    Returns None when nothing matches (including blank or non-positive
    numeric input); other failures propagate.
    """
    key = str(query).strip().lower()
    if not key or (key.lstrip('-').isdecimal() and (key.startswith('-') or int(key) == 0)):
        logger.info(f"Search query {query!r} can't match anything.")
        return None
    try:
        return await get_pokemon_detail_data(key, client=client)
    except ResourceNotFoundError:
        logger.info(f"No Pokémon matches search query '{key}'.")
        return None

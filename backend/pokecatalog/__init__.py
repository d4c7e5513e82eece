# pokecatalog/__init__.py

# Expose resolvers, models and exceptions for easy import
from .catalog_client import fetch_catalog, get_catalog_client, close_catalog_client
from .catalog_data import (
    get_pokemon_page_data, get_pokemon_detail_data,
    get_pokemon_by_type_data, search_pokemon_data,
)
from .evolution import resolve_chain, resolve_chain_url
from .models import PokemonSummary, PokemonDetail, PokemonStats, EvolutionStage, PokemonPage
from .exceptions import CatalogError, ResourceNotFoundError, UpstreamError, MalformedResponseError, InvalidKeyError
from .config import POKEMON_TYPES, CATEGORY_MEMBER_LIMIT

__all__ = [
    # Resolvers
    "fetch_catalog",
    "get_pokemon_page_data", "get_pokemon_detail_data",
    "get_pokemon_by_type_data", "search_pokemon_data",
    "resolve_chain", "resolve_chain_url",
    # Client lifecycle
    "get_catalog_client", "close_catalog_client",
    # Models
    "PokemonSummary", "PokemonDetail", "PokemonStats", "EvolutionStage", "PokemonPage",
    "POKEMON_TYPES", "CATEGORY_MEMBER_LIMIT",
    # Exceptions
    "CatalogError", "ResourceNotFoundError", "UpstreamError", "MalformedResponseError", "InvalidKeyError",
]

__version__ = "1.0.0" # Keep version consistent with pyproject.toml

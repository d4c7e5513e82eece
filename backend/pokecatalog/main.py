# backend/pokecatalog/main.py

from fastapi import FastAPI, Path, Query, Request, status
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging
from typing import List, Optional

from .catalog_data import (
    get_pokemon_page_data,
    get_pokemon_detail_data,
    get_pokemon_by_type_data,
    search_pokemon_data,
)
from .models import PokemonSummary, PokemonDetail, PokemonPage
from .config import settings, POKEMON_TYPES
from .catalog_client import get_catalog_client, close_catalog_client
from .exceptions import CatalogError, ResourceNotFoundError, InvalidKeyError

# Configure logging
logger = logging.getLogger(__name__)
logging.basicConfig(level=settings.log_level, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup phase
    logger.info("Application startup...")
    await get_catalog_client() # Ensures client is created
    logger.info(f"Catalog HTTPX client initialized for {settings.pokeapi_base_url}.")

    yield # Application runs here

    # Shutdown phase
    logger.info("Application shutdown...")
    await close_catalog_client()
    logger.info("Resources cleaned up.")

app = FastAPI(
    title="Pokécatalog API",
    description="Aggregates PokeAPI resources into list, type, search and detail views",
    version="1.0.0",
    lifespan=lifespan,
)

# --- Error Mapping ---
@app.exception_handler(ResourceNotFoundError)
async def not_found_handler(request: Request, exc: ResourceNotFoundError):
    logger.warning(f"{request.url.path} -> 404: {exc}")
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})

@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError):
    logger.error(f"{request.url.path} -> 502 ({type(exc).__name__}): {exc}")
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": "The Pokémon catalog could not be reached or returned unexpected data.", "error": type(exc).__name__}
    )

@app.exception_handler(InvalidKeyError)
async def invalid_key_handler(request: Request, exc: InvalidKeyError):
    return JSONResponse(status_code=422, content={"detail": str(exc)})

# --- API Endpoints ---

@app.get("/")
async def read_root():
    """ Basic root endpoint to check if the API is running. """
    return {
        "message": "Welcome to the Pokécatalog API!",
        "documentation": "/docs",
        "catalog": settings.pokeapi_base_url
    }

@app.get(
    "/api/pokemon",
    response_model=PokemonPage,
    summary="Get One Page of Pokémon",
    description="Returns summaries for one page of the national index plus the total count. Fails as a whole if any entry can't be resolved.",
    tags=["Pokedex"]
)
async def get_pokemon_page(
    offset: int = Query(0, ge=0, description="Index of the first Pokémon on the page."),
    limit: Optional[int] = Query(None, ge=1, description="Page size; defaults to the configured page size.")
):
    logger.info(f"Received request for Pokémon page offset={offset} limit={limit}")
    page = await get_pokemon_page_data(offset=offset, limit=limit)
    logger.info(f"Returning {len(page.items)} of {page.total} Pokémon.")
    return page

@app.get(
    "/api/pokemon/{pokemon_id_or_name}",
    response_model=PokemonDetail,
    summary="Get Detailed Data for a Specific Pokémon",
    description="Returns detailed information for a single Pokémon identified by its National Pokédex ID or name.",
    tags=["Pokemon"]
)
async def get_pokemon_details(
    pokemon_id_or_name: str = Path(
        ...,
        description="The National Pokédex ID (integer) or name (string, lowercase) of the Pokémon.",
        examples=["pikachu", "25"]
    )
):
    identifier = int(pokemon_id_or_name) if pokemon_id_or_name.isdecimal() else pokemon_id_or_name
    logger.info(f"Received request for Pokémon details: '{identifier}'")
    pokemon_data = await get_pokemon_detail_data(identifier)
    logger.info(f"Returning details for Pokémon: {pokemon_data.name} (ID: {pokemon_data.id})")
    return pokemon_data

@app.get(
    "/api/search",
    response_model=Optional[PokemonDetail],
    summary="Search for a Pokémon",
    description="Looks a Pokémon up by name or ID. Returns null rather than 404 when nothing matches.",
    tags=["Pokemon"]
)
async def search_pokemon(q: str = Query(..., description="Name or ID to look up.")):
    logger.info(f"Received search request: {q!r}")
    return await search_pokemon_data(q)

@app.get(
    "/api/types",
    response_model=List[str],
    summary="Get All Pokémon Types",
    description="Returns the names of the 18 elemental types, for populating filters.",
    tags=["Metadata"]
)
async def get_types():
    return POKEMON_TYPES

@app.get(
    "/api/types/{type_name}/pokemon",
    response_model=List[PokemonSummary],
    summary="Get Pokémon of a Type",
    description="Returns summaries for the first 40 Pokémon of a type. Members that can't be resolved are left out.",
    tags=["Pokedex"]
)
async def get_pokemon_by_type(type_name: str = Path(..., description="Type name, e.g. 'fire'.")):
    logger.info(f"Received request for Pokémon of type '{type_name}'")
    summaries = await get_pokemon_by_type_data(type_name)
    logger.info(f"Returning {len(summaries)} Pokémon of type '{type_name}'.")
    return summaries

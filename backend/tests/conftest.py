# backend/tests/conftest.py
# Payload factories shaped like PokeAPI v2 responses, plus a per-test httpx client

import httpx
import pytest_asyncio

from pokecatalog.config import settings

BASE_URL = settings.pokeapi_base_url.rstrip('/')
SPRITE_BASE = "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon"
STAT_NAMES = ("hp", "attack", "defense", "special-attack", "special-defense", "speed")


def pokemon_url(key) -> str:
    return f"{BASE_URL}/pokemon/{key}"


def artwork_url(pokemon_id: int, shiny: bool = False) -> str:
    return f"{SPRITE_BASE}/other/official-artwork/{'shiny/' if shiny else ''}{pokemon_id}.png"


def pokemon_payload(
    pokemon_id: int,
    name: str,
    types=("normal",),
    stats=(45, 49, 49, 65, 65, 45),
    abilities=("overgrow", "chlorophyll"),
    artwork: bool = True,
):
    sprites = {
        "front_default": f"{SPRITE_BASE}/{pokemon_id}.png",
        "front_shiny": f"{SPRITE_BASE}/shiny/{pokemon_id}.png",
        "other": {"official-artwork": {"front_default": None, "front_shiny": None}},
    }
    if artwork:
        sprites["other"]["official-artwork"] = {
            "front_default": artwork_url(pokemon_id),
            "front_shiny": artwork_url(pokemon_id, shiny=True),
        }
    return {
        "id": pokemon_id,
        "name": name,
        "height": 7,
        "weight": 69,
        "base_experience": 64,
        "types": [
            {"slot": i, "type": {"name": t, "url": f"{BASE_URL}/type/{t}/"}}
            for i, t in enumerate(types, start=1)
        ],
        "abilities": [
            {"slot": i, "is_hidden": False, "ability": {"name": a, "url": f"{BASE_URL}/ability/{a}/"}}
            for i, a in enumerate(abilities, start=1)
        ],
        "stats": [
            {"stat": {"name": n, "url": f"{BASE_URL}/stat/{n}/"}, "base_stat": v, "effort": 0}
            for n, v in zip(STAT_NAMES, stats)
        ],
        "sprites": sprites,
        "species": {"name": name, "url": f"{BASE_URL}/pokemon-species/{pokemon_id}/"},
    }


def species_payload(species_id: int, name: str, chain_id=None):
    return {
        "id": species_id,
        "name": name,
        "evolution_chain": {"url": f"{BASE_URL}/evolution-chain/{chain_id}/"} if chain_id else None,
    }


def chain_node(name: str, *children):
    return {
        "is_baby": False,
        "species": {"name": name, "url": f"{BASE_URL}/pokemon-species/{name}/"},
        "evolution_details": [],
        "evolves_to": list(children),
    }


def chain_payload(chain_id: int, root):
    return {"id": chain_id, "baby_trigger_item": None, "chain": root}


def type_payload(type_id: int, name: str, member_ids):
    return {
        "id": type_id,
        "name": name,
        "pokemon": [
            {"slot": 1, "pokemon": {"name": f"mon-{i}", "url": f"{BASE_URL}/pokemon/{i}/"}}
            for i in member_ids
        ],
    }


@pytest_asyncio.fixture
async def catalog_client():
    async with httpx.AsyncClient() as client:
        yield client

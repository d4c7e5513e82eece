# backend/pokecatalog/mappers.py
# Maps validated PokeAPI records onto the domain models

import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .exceptions import MalformedResponseError
from .models import PokemonSummary, PokemonDetail, PokemonStats, EvolutionStage
from .records import PokemonCore, BasePokemon

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

# Positions of the stats in the raw list, which PokeAPI always orders this way
STAT_FIELDS = ("hp", "attack", "defense", "special_attack", "special_defense", "speed")

def parse_record(model: Type[M], payload: Any, url: Optional[str] = None) -> M:
    """Validates a payload against a record/domain model, re-raising shape errors as MalformedResponseError."""
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        logger.error(f"Unexpected {model.__name__} shape from {url!r}: {e.error_count()} error(s)")
        raise MalformedResponseError(f"{model.__name__} payload from {url} is malformed: {e}", url=url) from e

def _require_sprite(record: PokemonCore, url: Optional[str]) -> str:
    sprite_url = record.sprites.preferred
    if not sprite_url:
        raise MalformedResponseError(f"No sprite for '{record.name}' at {url}", url=url)
    return sprite_url

def _summary_fields(record: PokemonCore, url: Optional[str]) -> Dict[str, Any]:
    return {
        "id": record.id,
        "name": record.name,
        "types": [t.type.name for t in record.types],
        "sprite_url": _require_sprite(record, url),
    }

def to_summary(payload: Dict[str, Any], url: Optional[str] = None) -> PokemonSummary:
    record = parse_record(PokemonCore, payload, url)
    return parse_record(PokemonSummary, _summary_fields(record, url), url)

def to_evolution_stage(payload: Dict[str, Any], url: Optional[str] = None) -> EvolutionStage:
    record = parse_record(PokemonCore, payload, url)
    return parse_record(EvolutionStage, {
        "id": record.id,
        "name": record.name,
        "sprite_url": _require_sprite(record, url),
    }, url)

def to_stats(record: BasePokemon, url: Optional[str] = None) -> PokemonStats:
    if len(record.stats) < len(STAT_FIELDS):
        raise MalformedResponseError(
            f"Expected {len(STAT_FIELDS)} stats for '{record.name}', got {len(record.stats)}", url=url
        )
    values = {field: entry.base_stat for field, entry in zip(STAT_FIELDS, record.stats)}
    return parse_record(PokemonStats, values, url)

def to_detail(
    record: BasePokemon,
    stats: PokemonStats,
    evolution_chain: List[EvolutionStage],
    url: Optional[str] = None,
) -> PokemonDetail:
    return parse_record(PokemonDetail, {
        **_summary_fields(record, url),
        "sprite_shiny_url": record.sprites.preferred_shiny,
        "height": record.height,
        "weight": record.weight,
        "stats": stats,
        "abilities": [a.ability.name for a in record.abilities],
        "evolution_chain": evolution_chain,
    }, url)

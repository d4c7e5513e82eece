# backend/pokecatalog/models.py

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Tuple

class PokemonStats(BaseModel):
    """Base stats in canonical game order. Field order matters."""
    model_config = ConfigDict(frozen=True)

    hp: int = Field(..., ge=0, le=255)
    attack: int = Field(..., ge=0, le=255)
    defense: int = Field(..., ge=0, le=255)
    special_attack: int = Field(..., ge=0, le=255)
    special_defense: int = Field(..., ge=0, le=255)
    speed: int = Field(..., ge=0, le=255)

    def as_tuple(self) -> Tuple[int, int, int, int, int, int]:
        return (self.hp, self.attack, self.defense, self.special_attack, self.special_defense, self.speed)

class EvolutionStage(BaseModel):
    """One resolved member of an evolutionary lineage."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0, description="Pokémon ID")
    name: str = Field(..., description="Pokémon name")
    sprite_url: str = Field(..., description="Artwork URL (HTTPS)")

class PokemonSummary(BaseModel):
    """Summary data for a Pokémon, for list and type views."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0, description="Pokémon ID")
    name: str = Field(..., description="Pokémon name")
    # Not checked against POKEMON_TYPES, unknown tags must round-trip
    types: Tuple[str, ...] = Field(..., min_length=1, description="Type names in slot order")
    sprite_url: str = Field(..., description="Official artwork URL, falling back to the front sprite")

class PokemonDetail(PokemonSummary):
    sprite_shiny_url: Optional[str] = None
    height: int # Decimetres, as reported by PokeAPI
    weight: int # Hectograms, as reported by PokeAPI
    stats: PokemonStats
    abilities: Tuple[str, ...]
    evolution_chain: Tuple[EvolutionStage, ...] = ()

class PokemonPage(BaseModel):
    """One page of the national index."""
    model_config = ConfigDict(frozen=True)

    items: Tuple[PokemonSummary, ...]
    total: int = Field(..., ge=0, description="Total number of Pokémon in the catalog")

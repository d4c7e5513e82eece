# backend/pokecatalog/records.py
# Shapes of the raw PokeAPI resources, validated before they are mapped to the domain models
from pydantic import BaseModel, Field, AliasPath, field_validator
from typing import List, Optional, Dict, Any

# --- Basic Resources ---
class APIResource(BaseModel):
    url: str

class NamedAPIResource(APIResource):
    name: str

# --- Type Models ---
class PokemonTypeSlot(BaseModel):
    slot: int
    type: NamedAPIResource

# --- Ability Models ---
class PokemonAbilitySlot(BaseModel):
    slot: int
    is_hidden: bool = False
    ability: NamedAPIResource

# --- Stat Models ---
class PokemonStatData(BaseModel):
    stat: NamedAPIResource
    base_stat: int
    effort: int = 0

# --- Sprite Models ---
class SpriteData(BaseModel):
    front_default: Optional[str] = None
    front_shiny: Optional[str] = None
    official_artwork_front: Optional[str] = Field(
        None, validation_alias=AliasPath('other', 'official-artwork', 'front_default')
    )
    official_artwork_shiny: Optional[str] = Field(
        None, validation_alias=AliasPath('other', 'official-artwork', 'front_shiny')
    )

    @field_validator('front_default', 'front_shiny', 'official_artwork_front', 'official_artwork_shiny')
    @classmethod
    def ensure_https(cls, url: Optional[str]) -> Optional[str]:
        if isinstance(url, str) and url.startswith("http://"):
            return url.replace("http://", "https://", 1)
        return url

    @property
    def preferred(self) -> Optional[str]:
        return self.official_artwork_front or self.front_default

    @property
    def preferred_shiny(self) -> Optional[str]:
        return self.official_artwork_shiny or self.front_shiny

# --- Pokemon Models ---
class PokemonCore(BaseModel):
    """Fields shared by every projection of a /pokemon/{key} record."""
    id: int
    name: str
    types: List[PokemonTypeSlot] = []
    sprites: SpriteData

class BasePokemon(PokemonCore):
    """Full /pokemon/{key} record as needed for the detail view."""
    height: int
    weight: int
    abilities: List[PokemonAbilitySlot] = []
    stats: List[PokemonStatData]
    species: NamedAPIResource

# --- Species Model ---
class BaseSpecies(BaseModel):
    id: int
    name: str
    # Left loose: a missing or broken chain reference only costs the lineage, not the species
    evolution_chain: Optional[Any] = None

    @property
    def evolution_chain_url(self) -> Optional[str]:
        url = self.evolution_chain.get("url") if isinstance(self.evolution_chain, dict) else None
        return url if isinstance(url, str) and url else None

# --- Index / Membership Models ---
class PokemonIndexPage(BaseModel):
    """/pokemon?offset=&limit= payload."""
    count: int
    results: List[NamedAPIResource]

class TypeMemberSlot(BaseModel):
    slot: Optional[int] = None
    pokemon: NamedAPIResource

class TypeMembership(BaseModel):
    """/type/{name} payload, reduced to its member list."""
    id: int
    name: str
    pokemon: List[TypeMemberSlot] = []

# --- Evolution Chain Model ---
class EvolutionChain(BaseModel):
    id: int
    # Walked by hand in evolution.py so malformed nodes don't sink the whole tree
    chain: Dict[str, Any]

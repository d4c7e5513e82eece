# backend/pokecatalog/config.py

import os
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
# Useful for local development
env_path = os.path.join(os.path.dirname(os.path.dirname(__file__)), '.env')
load_dotenv(dotenv_path=env_path)

# Category membership is never enumerated past this many entries
CATEGORY_MEMBER_LIMIT = 40

# Closed vocabulary of elemental types, in PokeAPI id order
POKEMON_TYPES = [
    'normal', 'fire', 'water', 'electric', 'grass', 'ice',
    'fighting', 'poison', 'ground', 'flying', 'psychic', 'bug',
    'rock', 'ghost', 'dragon', 'dark', 'steel', 'fairy'
]

class Settings(BaseSettings):
    """Application settings."""

    # PokeAPI base URL
    # Reads POKEAPI_BASE_URL from environment or .env file
    pokeapi_base_url: str = "https://pokeapi.co/api/v2"

    # HTTP timeouts in seconds
    request_timeout_seconds: float = 10.0
    connect_timeout_seconds: float = 5.0

    # Upper bound on outstanding requests within a single fan-out
    max_concurrent_requests: int = 10

    # Pool size of the shared client, across all in-flight API requests
    max_connections: int = 50

    # Page size used when the caller doesn't pass one
    default_page_limit: int = 20

    log_level: str = "INFO"

    class Config:
        # Specifies the .env file encoding
        env_file_encoding = 'utf-8'


# Create a single instance of the settings to be imported in other modules
settings = Settings()

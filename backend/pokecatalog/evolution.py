# backend/pokecatalog/evolution.py
"""Evolution chain traversal."""

import logging
from typing import Any, Dict, List, Optional

import httpx

from .catalog_client import fetch_catalog
from .fanout import gather_tolerant
from .mappers import parse_record, to_evolution_stage
from .models import EvolutionStage
from .records import EvolutionChain

logger = logging.getLogger(__name__)


def flatten_chain(chain_node: Dict[str, Any]) -> List[str]:
    """Species names of an evolution tree in pre-order, children in source order.

    Uses an explicit stack so arbitrarily deep chains don't hit the recursion
    limit. A node without a usable species name contributes nothing itself,
    but its descendants are still visited.
    """
    names: List[str] = []
    stack: List[Any] = [chain_node]
    while stack:
        node = stack.pop()
        if not isinstance(node, dict):
            continue
        species = node.get("species")
        name = species.get("name") if isinstance(species, dict) else None
        if isinstance(name, str) and name:
            names.append(name)
        else:
            logger.warning("Evolution node without a species name, visiting its children anyway.")
        children = node.get("evolves_to") or []
        if isinstance(children, list):
            # Reversed so the first child is popped first
            stack.extend(reversed(children))
    return names


async def _resolve_stage(species_name: str, client: Optional[httpx.AsyncClient]) -> EvolutionStage:
    endpoint = f"/pokemon/{species_name}"
    payload = await fetch_catalog(endpoint, client=client)
    return to_evolution_stage(payload, endpoint)


async def resolve_chain(
    chain_node: Dict[str, Any],
    client: Optional[httpx.AsyncClient] = None,
) -> List[EvolutionStage]:
    """
    Resolves every species in an evolution tree into an EvolutionStage.

    Args:
        chain_node: The `chain` root of a PokeAPI evolution-chain resource.
        client: httpx client to use; the shared one is used when omitted.

    Returns:
        Successfully resolved stages in pre-order. Stages that fail to resolve
        are left out; a tree where nothing resolves gives an empty list.
    """
    names = flatten_chain(chain_node)
    stages = await gather_tolerant(names, lambda name: _resolve_stage(name, client))
    if len(stages) < len(names):
        logger.warning(f"Resolved {len(stages)} of {len(names)} evolution stages.")
    return stages


async def resolve_chain_url(url: str, client: Optional[httpx.AsyncClient] = None) -> List[EvolutionStage]:
    """Fetches an evolution-chain resource and resolves it. Raises if the chain itself can't be fetched."""
    payload = await fetch_catalog(url, client=client)
    chain = parse_record(EvolutionChain, payload, url)
    return await resolve_chain(chain.chain, client=client)

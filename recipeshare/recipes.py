import json
import logging
from pathlib import Path

import httpx

from . import schemas


logger = logging.getLogger(__name__)


def load_recipes(path):
    """Load recipe payloads from a JSON file and return them as dicts.

    Args:
        path (str or Path): Path to the JSON file holding a list of
            recipe payloads.

    Returns:
        list: recipe dictionaries, or an empty list if the file is missing.

    Raises:
        ValueError: if the file does not hold a JSON list.
    """
    p = Path(path)
    if not p.exists():
        logger.warning("Seed file %s not found", p)
        return []
    with p.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{p} must contain a JSON list of recipes")
    return data


def seed_store(store, items) -> int:
    """Add every payload in ``items`` to ``store``; return how many."""
    added = 0
    for index, item in enumerate(items):
        try:
            recipe = schemas.RecipePayload.model_validate(item).root
            store.create_recipe(recipe)
        except Exception:
            logger.exception("Failed to seed recipe #%d: %r", index, item)
            raise
        added += 1
    return added


def import_recipes(client: httpx.Client, items, path: str = "/api/recipes"):
    """POST each payload to a running service and return the created ids."""
    ids = []
    for item in items:
        res = client.post(path, json=item)
        res.raise_for_status()
        ids.append(res.json()["id"])
    logger.info("Imported %d recipe(s) via %s", len(ids), path)
    return ids

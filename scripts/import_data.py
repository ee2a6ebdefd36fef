import sys
from pathlib import Path

import httpx

from recipeshare.config import get_settings
from recipeshare.recipes import import_recipes, load_recipes


def main():
    settings = get_settings()
    default = Path(__file__).resolve().parents[1] / 'data' / 'recipes.json'
    p = Path(sys.argv[1]) if len(sys.argv) > 1 else default
    items = load_recipes(p)
    if not items:
        print(f'{p} has no recipes')
        return
    base_url = f'http://{settings.host}:{settings.port}'
    with httpx.Client(base_url=base_url, timeout=10) as client:
        ids = import_recipes(client, items, path=settings.api_prefix)
    print(f'Imported {len(ids)} recipes')


if __name__ == '__main__':
    main()

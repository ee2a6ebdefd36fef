# flake8: noqa
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))  # noqa: E402

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from recipeshare import app as app_module
from recipeshare import crud
from recipeshare.recipes import import_recipes, load_recipes, seed_store


SEED = [
    {"title": "Pancakes", "servings": 4},
    {"type": "SOUP", "title": "Tomato Soup", "spiceLevel": "mild"},
]


def write_seed(tmp_path, data):
    p = tmp_path / "recipes.json"
    p.write_text(json.dumps(data), encoding="utf-8")
    return p


def test_load_missing_file_returns_empty(tmp_path):
    assert load_recipes(tmp_path / "nope.json") == []


def test_load_requires_list(tmp_path):
    p = write_seed(tmp_path, {"title": "not a list"})
    with pytest.raises(ValueError):
        load_recipes(p)


def test_seed_store(tmp_path):
    store = crud.RecipeStore()
    assert seed_store(store, load_recipes(write_seed(tmp_path, SEED))) == 2
    soup = store.get_recipe(2)
    assert soup.recipe_type == "SOUP"
    assert soup.spice_level == "mild"


def test_bundled_seed_file_is_valid():
    p = Path(__file__).resolve().parent.parent / "data" / "recipes.json"
    store = crud.RecipeStore()
    assert seed_store(store, load_recipes(p)) == len(load_recipes(p))


def test_lifespan_builds_and_seeds_store(tmp_path, monkeypatch):
    monkeypatch.setattr(app_module.settings, "seed_file", write_seed(tmp_path, SEED))
    monkeypatch.setattr(app_module.app, "dependency_overrides", {})

    with TestClient(app_module.app) as client:
        assert isinstance(app_module.app.state.store, crud.RecipeStore)
        items = client.get("/api/recipes").json()
        assert [it["title"] for it in items] == ["Pancakes", "Tomato Soup"]
        assert client.get("/health").json()["recipes"] == 2


def test_import_recipes_posts_each_payload(monkeypatch):
    monkeypatch.setattr(app_module.settings, "seed_file", None)
    monkeypatch.setattr(app_module.app, "dependency_overrides", {})

    with TestClient(app_module.app) as client:
        ids = import_recipes(client, SEED)
        assert ids == [1, 2]
        assert client.get("/api/recipes/2").json()["spiceLevel"] == "mild"


def test_seed_store_logs_bad_entry(caplog):
    store = crud.RecipeStore()
    bad = [{"title": "Fine"}, {"type": "STEW", "title": "Nope"}]
    with pytest.raises(ValidationError):
        seed_store(store, bad)
    assert "Failed to seed recipe #1" in caplog.text
    assert "STEW" in caplog.text
    assert len(store) == 1

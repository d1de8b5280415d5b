from __future__ import annotations

import json
import pytest
from datetime import datetime, timezone
from pathlib import Path

from src.app.domain.errors import InvalidInputError
from src.app.services.seed import load_seed_recipes, recipe_from_seed_entry

DEMO_FILE = Path(__file__).resolve().parents[2] / "resources" / "init_recipes.json"


class TestRecipeFromSeedEntry:
    def test_keeps_published_at(self) -> None:
        recipe = recipe_from_seed_entry(
            {"name": "Soup", "tags": ["veg"], "publishedAt": "2021-02-03T12:00:00Z"}
        )

        assert recipe.name == "Soup"
        assert recipe.published_at == datetime(2021, 2, 3, 12, 0, tzinfo=timezone.utc)

    def test_missing_published_at_defaults_to_now(self) -> None:
        before = datetime.now(timezone.utc)
        recipe = recipe_from_seed_entry({"name": "Soup"})
        assert recipe.published_at >= before

    def test_rejects_bad_shape(self) -> None:
        with pytest.raises(InvalidInputError):
            recipe_from_seed_entry({"name": "Soup", "tags": "veg"})


class TestLoadSeedRecipes:
    def test_loads_demo_file(self) -> None:
        recipes = load_seed_recipes(DEMO_FILE)

        assert len(recipes) == 3
        assert recipes[0].name == "Homemade Pizza"

    def test_rejects_non_array(self, tmp_path: Path) -> None:
        path = tmp_path / "recipes.json"
        path.write_text(json.dumps({"name": "Soup"}), encoding="utf-8")

        with pytest.raises(ValueError):
            load_seed_recipes(path)

import itertools
import logging
from typing import List, Union

from . import models, schemas


logger = logging.getLogger(__name__)

# Fields replaced by update and patch; servings and variant data are kept.
UPDATABLE_FIELDS = ("title", "description", "ingredients", "instructions")


class RecipeStore:
    """In-memory owner of recipe records and their identifiers.

    Lookups are linear scans in insertion order. Not-found is reported by
    returning ``None`` (or ``False`` for deletes), never by raising.

    There is no locking: ``next()`` on the id counter is atomic, but the
    append that follows it is not coordinated with other writers.
    """

    def __init__(self) -> None:
        self._recipes: List[models.Recipe] = []
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._recipes)

    def __iter__(self):
        return iter(list(self._recipes))

    def get_recipe(self, recipe_id: int):
        return next((r for r in self._recipes if r.id == recipe_id), None)

    def get_recipes(self) -> List[models.Recipe]:
        return list(self._recipes)

    def create_recipe(
        self,
        recipe: Union[schemas.RecipeCreate, schemas.SoupRecipeCreate],
    ) -> models.Recipe:
        db_recipe = models.Recipe(
            recipe_type=recipe.type,
            title=recipe.title,
            description=recipe.description,
            ingredients=recipe.ingredients,
            instructions=recipe.instructions,
            servings=recipe.servings,
        )
        if isinstance(recipe, schemas.SoupRecipeCreate):
            db_recipe.spice_level = recipe.spice_level
        # any id sent by the client is overwritten here
        db_recipe.id = next(self._ids)
        self._recipes.append(db_recipe)
        return db_recipe

    def update_recipe(self, recipe_id: int, recipe: schemas.RecipeBase):
        db_recipe = self.get_recipe(recipe_id)
        if not db_recipe:
            return None
        for field in UPDATABLE_FIELDS:
            setattr(db_recipe, field, getattr(recipe, field))
        return db_recipe

    def patch_recipe(self, recipe_id: int, recipe: schemas.RecipeBase):
        db_recipe = self.get_recipe(recipe_id)
        if not db_recipe:
            return None
        for field in UPDATABLE_FIELDS:
            value = getattr(recipe, field)
            if value is not None:
                setattr(db_recipe, field, value)
        return db_recipe

    def delete_recipe(self, recipe_id: int) -> bool:
        for i, db_recipe in enumerate(self._recipes):
            if db_recipe.id == recipe_id:
                del self._recipes[i]
                logger.debug("Removed %r", db_recipe)
                return True
        return False

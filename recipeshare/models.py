import enum

from sqlalchemy import Column, Integer, String, Text

from .db import Base


class RecipeType(str, enum.Enum):
    RECIPE = "RECIPE"
    SOUP = "SOUP"


class Recipe(Base):
    """A stored recipe.

    Variants share one table and are told apart by ``recipe_type``.
    Variant-only columns stay NULL for the other variants.
    """

    __tablename__ = "recipes"
    id = Column(Integer, primary_key=True, index=True)
    recipe_type = Column(
        String(31), nullable=False, default=RecipeType.RECIPE.value
    )
    title = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    ingredients = Column(Text, nullable=True)
    instructions = Column(Text, nullable=True)
    servings = Column(Integer, nullable=True)
    # SOUP only
    spice_level = Column(String(255), nullable=True)

    @property
    def is_soup(self) -> bool:
        return self.recipe_type == RecipeType.SOUP.value

    def __repr__(self) -> str:
        return (
            f"<Recipe(id={self.id}, type={self.recipe_type}, "
            f"title={self.title})>"
        )

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    RootModel,
    Tag,
    field_validator,
    model_serializer,
)

from .models import RecipeType


class RecipeBase(BaseModel):
    title: Optional[str] = Field(
        None, json_schema_extra={"example": "Tomato Soup"}
    )
    description: Optional[str] = Field(
        None, json_schema_extra={"example": "A quick weeknight soup"}
    )
    ingredients: Optional[str] = Field(
        None, json_schema_extra={"example": "tomatoes, onion, stock"}
    )
    instructions: Optional[str] = Field(
        None, json_schema_extra={"example": "Simmer for 20 minutes"}
    )
    servings: Optional[int] = Field(None, json_schema_extra={"example": 4})


class RecipeCreate(RecipeBase):
    # Accepted so clients can echo records back; the store assigns ids.
    id: Optional[int] = None
    type: Literal["RECIPE"] = "RECIPE"

    @field_validator("type", mode="before")
    @classmethod
    def _null_type_is_plain(cls, v):
        return v or RecipeType.RECIPE.value


class SoupRecipeCreate(RecipeBase):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = None
    type: Literal["SOUP"]
    spice_level: Optional[str] = Field(
        None, alias="spiceLevel", json_schema_extra={"example": "mild"}
    )


def recipe_type_of(value: Any) -> Optional[str]:
    """Pick the variant tag from a raw payload or a model.

    Payloads without a ``type``, or with a null one, are plain recipes.
    """
    if isinstance(value, dict):
        return value.get("type") or RecipeType.RECIPE.value
    return getattr(value, "type", None) or RecipeType.RECIPE.value


RecipeVariant = Annotated[
    Union[
        Annotated[RecipeCreate, Tag(RecipeType.RECIPE.value)],
        Annotated[SoupRecipeCreate, Tag(RecipeType.SOUP.value)],
    ],
    Discriminator(recipe_type_of),
]


class RecipePayload(RootModel[RecipeVariant]):
    """Request body for creating a recipe of any variant."""


class RecipeUpdate(RecipeBase):
    pass


class Recipe(RecipeBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    type: str = Field(
        RecipeType.RECIPE.value,
        validation_alias=AliasChoices("recipe_type", "type"),
    )
    spice_level: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("spice_level", "spiceLevel"),
        serialization_alias="spiceLevel",
    )

    @model_serializer(mode="wrap")
    def _variant_fields(self, handler):
        data = handler(self)
        if self.type != RecipeType.SOUP.value:
            data.pop("spiceLevel", None)
            data.pop("spice_level", None)
        return data

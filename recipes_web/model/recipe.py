from dataclasses import dataclass, field
from typing import Any


class InvalidRecipeError(ValueError):
    """Raised when a recipe record from the API does not have the expected shape."""


@dataclass
class Recipe:
    id: str | None = None
    name: str = ""
    tags: list[str] = field(default_factory=list)
    ingredients: list[str] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)
    published_at: str | None = None

    @classmethod
    def from_json(cls, data: Any) -> "Recipe":
        """Build a Recipe from one element of the /recipes JSON array."""
        if not isinstance(data, dict):
            raise InvalidRecipeError(f"Expected a JSON object, got {type(data).__name__}")

        name = data.get("name")
        if not isinstance(name, str) or not name.strip():
            raise InvalidRecipeError("Recipe has no name")

        recipe_id = data.get("id")
        # bool is an int subclass
        if isinstance(recipe_id, int) and not isinstance(recipe_id, bool):
            recipe_id = str(recipe_id)
        elif recipe_id is not None and not isinstance(recipe_id, str):
            raise InvalidRecipeError(f"Recipe '{name}' has an invalid id: {recipe_id!r}")

        published_at = data.get("publishedAt")
        if published_at is not None and not isinstance(published_at, str):
            raise InvalidRecipeError(f"Recipe '{name}' has an invalid publishedAt: {published_at!r}")

        return Recipe(id=recipe_id or None, name=name,
                      tags=_string_list(data, "tags", name),
                      ingredients=_string_list(data, "ingredients", name),
                      instructions=_string_list(data, "instructions", name),
                      published_at=published_at)


def _string_list(data: dict, key: str, name: str) -> list[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise InvalidRecipeError(f"Recipe '{name}' has an invalid {key} field")
    return list(value)

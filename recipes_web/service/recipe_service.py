import logging
from typing import Any

import requests

from recipes_web import config
from recipes_web.model.recipe import InvalidRecipeError, Recipe

log = logging.getLogger(__name__)


class RecipeServiceError(Exception):
    """Raised when the recipes API could not produce a list of recipes."""


class RecipeService:
    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = (base_url or config.get_recipes_api_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else config.get_request_timeout()

    @property
    def recipes_url(self) -> str:
        return f"{self.base_url}/recipes"

    def list_recipes(self) -> list[Recipe]:
        """Fetch every recipe from GET /recipes.

        Raises:
            RecipeServiceError: the API is unreachable, answered with a non-2xx status,
                or the body is not a JSON array.
        """
        log.debug(f"Requesting recipes from {self.recipes_url}")
        try:
            response = requests.get(self.recipes_url, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.exceptions.RequestException as e:
            raise RecipeServiceError(f"Could not load recipes from {self.recipes_url}: {e}") from e
        except ValueError as e:
            raise RecipeServiceError(f"Recipes API returned invalid JSON: {e}") from e

        recipes = parse_recipes(payload)
        log.info(f"Loaded {len(recipes)} recipes")
        return recipes


def parse_recipes(payload: Any) -> list[Recipe]:
    """Validate a /recipes response body, dropping entries that are not valid recipes."""
    if not isinstance(payload, list):
        raise RecipeServiceError(f"Expected a JSON array of recipes, got {type(payload).__name__}")

    recipes = []
    for index, entry in enumerate(payload):
        try:
            recipes.append(Recipe.from_json(entry))
        except InvalidRecipeError as e:
            log.warning(f"Skipping malformed recipe at index {index}: {e}")
    return recipes

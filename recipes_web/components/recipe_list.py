import asyncio
import logging
from collections import Counter
from dataclasses import dataclass
from typing import Iterable

from recipes_web.model.recipe import Recipe
from recipes_web.service.recipe_service import RecipeService, RecipeServiceError

log = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Recipes could not be loaded. Please try again later."


@dataclass(frozen=True)
class RecipeCard:
    """One rendering unit of the recipe list."""
    key: str
    recipe: Recipe


def render_recipe_list(recipes: Iterable[Recipe]) -> list[RecipeCard]:
    """One card per recipe, in order.

    Cards are keyed by recipe id. Recipes without an id, or sharing an id with another
    recipe in the list, fall back to their position.
    """
    recipes = list(recipes)
    id_counts = Counter(recipe.id for recipe in recipes if recipe.id)
    cards = []
    for index, recipe in enumerate(recipes):
        if recipe.id and id_counts[recipe.id] == 1:
            key = recipe.id
        else:
            key = f"index-{index}"
        cards.append(RecipeCard(key=key, recipe=recipe))
    return cards


class RecipeListView:
    # recipes is only ever replaced as a whole, never appended to
    recipes: list[Recipe]
    error: str | None = None
    loading: bool = False

    def __init__(self, service: RecipeService):
        self.service = service
        self.recipes = []
        self._task: asyncio.Task | None = None
        self._closed = False

    def initialize(self) -> asyncio.Task:
        """Reset the list and start the single fetch. Must be called from a running event loop."""
        if self._task is not None:
            return self._task
        self.recipes = []
        self.error = None
        self.loading = True
        self._task = asyncio.get_running_loop().create_task(self.load())
        return self._task

    async def load(self) -> None:
        try:
            records = await asyncio.to_thread(self.service.list_recipes)
        except RecipeServiceError as e:
            if not self._closed:
                self.on_load_failed(e)
            return
        finally:
            # Unexpected errors still propagate, but never leave the list loading.
            self.loading = False
        if not self._closed:
            self.on_data_loaded(records)

    def on_data_loaded(self, records: Iterable[Recipe]) -> None:
        self.recipes = list(records)
        self.error = None
        self.loading = False

    def on_load_failed(self, error: Exception) -> None:
        log.warning(f"Keeping {len(self.recipes)} recipes after failed load: {error}", exc_info=error)
        self.error = LOAD_FAILED_MESSAGE
        self.loading = False

    def render(self) -> list[RecipeCard]:
        return render_recipe_list(self.recipes)

    def close(self) -> None:
        """Tear the view down, dropping the result of a fetch that is still pending."""
        self._closed = True
        self.loading = False
        if self._task is not None and not self._task.done():
            self._task.cancel()

# state.py
import logging

import reflex as rx

from recipes_web.components.recipe_list import RecipeCard, RecipeListView, render_recipe_list
from recipes_web.model.recipe import Recipe
from recipes_web.service.recipe_service import RecipeService

log = logging.getLogger(__name__)


def get_recipe_service() -> RecipeService:
    return RecipeService()


class State(rx.State):
    # Recipes currently on display, replaced as a whole on every successful load.
    recipes: list[Recipe] = []
    # Message shown when the last load failed.
    error: str | None = None
    loading: bool = False

    @rx.var
    def cards(self) -> list[RecipeCard]:
        return render_recipe_list(self.recipes)

    @rx.event
    async def load_recipes(self):
        """Fetch the recipe list once per page load."""
        view = RecipeListView(get_recipe_service())
        task = view.initialize()
        self._sync_from_view(view)
        # Yield so the cleared list and loading indicator reach the frontend first.
        yield
        try:
            await task
        finally:
            self._sync_from_view(view)
        log.debug(f"Recipe list holds {len(self.recipes)} recipes")

    def _sync_from_view(self, view: RecipeListView):
        self.recipes = view.recipes
        self.error = view.error
        self.loading = view.loading

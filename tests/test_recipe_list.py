"""
Tests for the recipe list view.

The view is driven through asyncio.run with a mocked RecipeService, covering:
- the single fetch issued by initialize()
- render output before and after the fetch resolves
- state kept as-is when a fetch fails
- teardown while a fetch is still pending
"""
import asyncio
import threading
from unittest.mock import Mock

import pytest

from recipes_web.components.recipe_list import (
    LOAD_FAILED_MESSAGE,
    RecipeCard,
    RecipeListView,
    render_recipe_list,
)
from recipes_web.model.recipe import Recipe
from recipes_web.service.recipe_service import RecipeServiceError

SOUP = Recipe(name="Soup")
SALAD = Recipe(name="Salad")


def make_service(result=None, error=None):
    service = Mock()
    if error is not None:
        service.list_recipes.side_effect = error
    else:
        service.list_recipes.return_value = result if result is not None else []
    return service


def initialize_and_wait(view):
    async def scenario():
        await view.initialize()
    asyncio.run(scenario())
    return view


class TestRenderRecipeList:

    def test_empty(self):
        assert render_recipe_list([]) == []

    def test_one_card_per_recipe_in_order(self):
        cards = render_recipe_list([SOUP, SALAD])
        assert [card.recipe for card in cards] == [SOUP, SALAD]

    def test_keys_prefer_recipe_id(self):
        cards = render_recipe_list([Recipe(id="a1", name="Soup"), Recipe(id="b2", name="Salad")])
        assert [card.key for card in cards] == ["a1", "b2"]

    def test_missing_ids_fall_back_to_position(self):
        cards = render_recipe_list([Recipe(id="a1", name="Soup"), SALAD])
        assert [card.key for card in cards] == ["a1", "index-1"]

    def test_duplicate_ids_fall_back_to_position(self):
        cards = render_recipe_list([
            Recipe(id="dup", name="Soup"),
            Recipe(id="dup", name="Salad"),
            Recipe(id="c3", name="Stew"),
        ])
        assert [card.key for card in cards] == ["index-0", "index-1", "c3"]


class TestRecipeListView:

    def test_initial_state_is_empty(self):
        view = RecipeListView(make_service())
        assert view.render() == []
        assert view.error is None
        assert not view.loading

    def test_renders_fetched_recipes(self):
        service = make_service([SOUP, SALAD])
        view = initialize_and_wait(RecipeListView(service))

        assert view.render() == [
            RecipeCard(key="index-0", recipe=SOUP),
            RecipeCard(key="index-1", recipe=SALAD),
        ]
        assert not view.loading
        service.list_recipes.assert_called_once_with()

    def test_empty_response_renders_nothing(self):
        view = initialize_and_wait(RecipeListView(make_service([])))
        assert view.render() == []
        assert view.error is None

    def test_render_is_idempotent(self):
        view = initialize_and_wait(RecipeListView(make_service([SOUP, SALAD])))
        assert view.render() == view.render()

    def test_render_is_empty_before_fetch_resolves(self):
        async def scenario():
            view = RecipeListView(make_service([SOUP]))
            view.on_data_loaded([SALAD])
            task = view.initialize()
            before = view.render()
            loading = view.loading
            await task
            return before, loading, view.render()

        before, loading, after = asyncio.run(scenario())
        assert before == []
        assert loading
        assert [card.recipe for card in after] == [SOUP]

    def test_initialize_issues_a_single_fetch(self):
        service = make_service([SOUP])

        async def scenario():
            view = RecipeListView(service)
            first = view.initialize()
            second = view.initialize()
            await first
            return first, second

        first, second = asyncio.run(scenario())
        assert first is second
        assert service.list_recipes.call_count == 1

    def test_initialize_requires_running_loop(self):
        with pytest.raises(RuntimeError):
            RecipeListView(make_service()).initialize()

    def test_failed_initial_fetch_leaves_list_empty(self):
        service = make_service(error=RecipeServiceError("Connection refused"))
        view = initialize_and_wait(RecipeListView(service))

        assert view.render() == []
        assert view.error == LOAD_FAILED_MESSAGE
        assert not view.loading

    def test_failure_keeps_last_successful_recipes(self):
        view = RecipeListView(make_service())
        view.on_data_loaded([SOUP, SALAD])

        view.on_load_failed(RecipeServiceError("500 Server Error"))

        assert [card.recipe for card in view.render()] == [SOUP, SALAD]
        assert view.error == LOAD_FAILED_MESSAGE

    def test_data_loaded_replaces_state_and_clears_error(self):
        view = RecipeListView(make_service())
        view.on_data_loaded([SOUP])
        view.error = LOAD_FAILED_MESSAGE

        view.on_data_loaded([SALAD])

        assert view.recipes == [SALAD]
        assert view.error is None

    def test_unexpected_errors_propagate_without_leaving_view_loading(self):
        view = RecipeListView(make_service(error=KeyError("boom")))
        with pytest.raises(KeyError):
            initialize_and_wait(view)
        assert not view.loading
        assert view.render() == []

    def test_close_discards_pending_fetch(self):
        release = threading.Event()

        def slow_list_recipes():
            release.wait(5)
            return [SOUP]

        service = Mock()
        service.list_recipes.side_effect = slow_list_recipes

        async def scenario():
            view = RecipeListView(service)
            task = view.initialize()
            await asyncio.sleep(0)
            view.close()
            release.set()
            with pytest.raises(asyncio.CancelledError):
                await task
            return view

        view = asyncio.run(scenario())
        assert view.render() == []
        assert not view.loading

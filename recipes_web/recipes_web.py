"""Recipe list front end for the recipes API."""
import reflex as rx

from recipes_web import style
from recipes_web.components.recipe_item import recipe_item
from recipes_web.config import setup_logging
from recipes_web.state import State


def navbar() -> rx.Component:
    return rx.box(
        rx.hstack(
            rx.heading("Recipes", size="7", weight="bold"),
            align_items="center",
        ),
        bg=rx.color("accent", 3),
        padding="0.5em",
        width="100%",
    )


def recipe_list() -> rx.Component:
    return rx.vstack(
        rx.foreach(
            State.cards,
            lambda card: recipe_item(card.recipe, key=card.key),
        ),
        align="center",
        width="100%",
        spacing="1",
    )


def recipes() -> rx.Component:
    return rx.box(navbar(),
                  rx.center(rx.box(
                      rx.text("All recipes", style=style.title_style),
                      rx.cond(State.error,
                              rx.callout(State.error, icon="triangle_alert", color_scheme="red", role="alert"),
                              rx.box()),
                      rx.cond(State.loading,
                              rx.spinner(),
                              rx.cond(State.recipes,
                                      recipe_list(),
                                      rx.text("No recipes found."))),
                      width="100%",
                      max_width="40em",
                  )))


setup_logging()

app = rx.App()
app.add_page(recipes, route="/", on_load=State.load_recipes)

import reflex as rx

from recipes_web import style


def text_list(items: rx.Var, ordered: bool = False) -> rx.Component:
    list_component = rx.list.ordered if ordered else rx.list.unordered
    return list_component(
        rx.foreach(items, lambda item: rx.list.item(rx.text(item, style=style.detail_text_style))),
    )


def section(heading: str, items: rx.Var, ordered: bool = False) -> rx.Component:
    # Hidden when the recipe has nothing to list.
    return rx.cond(
        items,
        rx.box(
            rx.text(heading, style=style.section_heading_style),
            text_list(items, ordered=ordered),
        ),
        rx.fragment(),
    )


def recipe_item(recipe: rx.Var, key: rx.Var) -> rx.Component:
    """Card for a single recipe var: name, tags, ingredients and instructions."""
    return rx.box(
        rx.text(recipe.name, style=style.recipe_name_style),
        rx.hstack(
            rx.foreach(recipe.tags, lambda tag: rx.badge(tag, variant="soft")),
            wrap="wrap",
            spacing="1",
        ),
        section("Ingredients", recipe.ingredients),
        section("Instructions", recipe.instructions, ordered=True),
        key=key,
        style=style.card_style,
    )

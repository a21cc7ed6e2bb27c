# style.py
import reflex as rx

shadow = "rgba(0, 0, 0, 0.15) 0px 2px 8px"

title_style = dict(
    font_size="2em",
    font_weight="bold",
    margin_y="0.5em",
)

recipe_name_style = dict(
    font_size="1.4em",
    font_weight="bold",
)

card_style = dict(
    padding="1em",
    border_radius="5px",
    margin_y="0.5em",
    background_color=rx.color("accent", 4),
    box_shadow=shadow,
    max_width="40em",
    width="100%",
)

section_heading_style = dict(
    font_weight="medium",
    margin_top="0.5em",
)

detail_text_style = dict(
    font_size="1em",
)

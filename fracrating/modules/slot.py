"""Single slot compositing.

A slot is three stacked layers sharing one origin: the empty glyph at full
size, a clip region as wide as the fill fraction, and the filled glyph at
full size inside that clip region. The filled glyph is never resized to the
fraction, or it would shrink instead of being partially revealed.
"""
from fracrating.common.structs import (
    ClipRegion,
    Layer,
    SlotComposite,
)


def render(icon, empty_icon, fraction: float, size: int | float, color: tuple, empty_color: tuple):
    return SlotComposite(
        background=Layer(empty_icon, size, empty_color),
        clip=ClipRegion(fraction, size),
        foreground=Layer(icon, size, color),
    )


def draw(draw_list, x: float, y: float, composite: SlotComposite):
    background = composite.background
    background.glyph.draw(draw_list, x, y, background.size, background.tint)
    width = composite.clip.visible_width
    if width <= 0:
        return
    draw_list.push_clip_rect(x, y, x + width, y + composite.clip.size, True)
    foreground = composite.foreground
    foreground.glyph.draw(draw_list, x, y, foreground.size, foreground.tint)
    draw_list.pop_clip_rect()

from PIL import Image

from fracrating.common.structs import SlotComposite
from fracrating.common import fill
from fracrating.modules import colors


def slot_image(composite: SlotComposite):
    size = round(composite.clip.size)
    image = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    background = composite.background
    image.alpha_composite(colors.tint(background.glyph.rasterize(size), background.tint))
    width = round(composite.clip.visible_width)
    if width > 0:
        foreground = composite.foreground
        # Crop, never resize: the clip only reveals part of the full size glyph
        filled = colors.tint(foreground.glyph.rasterize(size), foreground.tint)
        image.alpha_composite(filled.crop((0, 0, width, size)))
    return image


def row_image(controller, value: float):
    config = controller.config
    size = round(config.size)
    spacing = round(config.spacing)
    width = fill.row_width(config.count, size, spacing)
    image = Image.new("RGBA", (width, size), (0, 0, 0, 0))
    for i, composite in enumerate(controller.render(value)):
        image.alpha_composite(slot_image(composite), (i * (size + spacing), 0))
    return image

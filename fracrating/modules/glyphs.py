from PIL import Image, ImageDraw, ImageFont
import functools
import pathlib
import math

from fracrating.modules import colors

# Polygons are drawn this many times larger then downsampled, poor man's antialiasing
supersample = 4
# ImDrawListFlags_AntiAliasedFill
anti_aliased_fill = 1 << 2


class PolygonGlyph:
    def __init__(self, points: list[tuple[float, float]]):
        # Points live in a unit square, (0, 0) top left
        self.points = list(points)

    def scaled(self, x: float, y: float, size: float):
        return [(x + px * size, y + py * size) for px, py in self.points]

    def draw(self, draw_list, x: float, y: float, size: float, color: tuple):
        col = colors.rgba_0_1_to_u32(tuple(color))
        points = self.scaled(x, y, size)
        cx = x + size / 2
        cy = y + size / 2
        # Triangle fan from the center, works for any star-shaped polygon.
        # No fill AA inside the fan, per triangle fringes seam along shared edges
        flags = draw_list.flags
        draw_list.flags = flags & ~anti_aliased_fill
        try:
            for (x1, y1), (x2, y2) in zip(points, points[1:] + points[:1]):
                draw_list.add_triangle_filled(cx, cy, x1, y1, x2, y2, col)
        finally:
            draw_list.flags = flags

    def rasterize(self, size: int):
        big = size * supersample
        mask = Image.new("L", (big, big), 0)
        ImageDraw.Draw(mask).polygon(self.scaled(0, 0, big), fill=255)
        mask = mask.resize((size, size), Image.Resampling.LANCZOS)
        image = Image.new("RGBA", (size, size), (255, 255, 255, 0))
        image.putalpha(mask)
        return image


class TextGlyph:
    def __init__(self, text: str, font_path: str | pathlib.Path = None):
        self.text = text
        self.font_path = font_path

    def draw(self, draw_list, x: float, y: float, size: float, color: tuple):
        import imgui
        imgui.set_window_font_scale(1.0)
        imgui.set_window_font_scale(size / imgui.get_font_size())
        text_size = imgui.calc_text_size(self.text)
        draw_list.add_text(
            x + (size - text_size.x) / 2,
            y + (size - text_size.y) / 2,
            colors.rgba_0_1_to_u32(tuple(color)),
            self.text
        )
        imgui.set_window_font_scale(1.0)

    def rasterize(self, size: int):
        if self.font_path:
            font = ImageFont.truetype(str(self.font_path), size)
        else:
            font = ImageFont.load_default(size=size)
        mask = Image.new("L", (size, size), 0)
        ImageDraw.Draw(mask).text((size / 2, size / 2), self.text, fill=255, font=font, anchor="mm")
        image = Image.new("RGBA", (size, size), (255, 255, 255, 0))
        image.putalpha(mask)
        return image


class ImageGlyph:
    def __init__(self, source: str | pathlib.Path | Image.Image):
        if isinstance(source, Image.Image):
            self.path = None
            self._image = source.convert("RGBA")
        else:
            self.path = pathlib.Path(source)
            self._image = None
        self.texture = None

    @property
    def image(self):
        if self._image is None:
            self._image = Image.open(self.path).convert("RGBA")
        return self._image

    def draw(self, draw_list, x: float, y: float, size: float, color: tuple):
        if self.texture is None:
            from fracrating.modules import textures
            self.texture = textures.Texture(self.image)
        draw_list.add_image(self.texture.texture_id, (x, y), (x + size, y + size), col=colors.rgba_0_1_to_u32(tuple(color)))

    def rasterize(self, size: int):
        return self.image.resize((size, size), Image.Resampling.LANCZOS)


def star_points(points: int = 5, inner_ratio: float = 0.4):
    outer = 0.5
    inner = outer * inner_ratio
    vertices = []
    for i in range(points * 2):
        radius = outer if i % 2 == 0 else inner
        angle = math.pi * i / points - math.pi / 2
        vertices.append((0.5 + radius * math.cos(angle), 0.5 + radius * math.sin(angle)))
    return vertices


@functools.cache
def star():
    return PolygonGlyph(star_points())

from PIL import Image
import functools
import numpy


@functools.cache
def hex_to_rgba_0_1(hex: str):
    hex = hex.lstrip("#")
    if len(hex) in (3, 4):
        hex = "".join(char * 2 for char in hex)
    r = int(hex[0:2], base=16) / 255
    g = int(hex[2:4], base=16) / 255
    b = int(hex[4:6], base=16) / 255
    if len(hex) > 6:
        a = int(hex[6:8], base=16) / 255
    else:
        a = 1.0
    return (r, g, b, a)


def to_rgba(color: str | tuple):
    if isinstance(color, str):
        return hex_to_rgba_0_1(color)
    if len(color) == 3:
        return (*color, 1.0)
    return tuple(color)


@functools.cache
def rgba_0_1_to_u32(rgba: tuple[float, float, float, float]):
    # Same packing as ImGui's IM_COL32 (ABGR, little endian)
    r, g, b, a = (round(min(max(channel, 0.0), 1.0) * 255) for channel in rgba)
    return (a << 24) | (b << 16) | (g << 8) | r


def tint(image: Image.Image, rgba: tuple[float, float, float, float]):
    pixels = numpy.array(image.convert("RGBA"), dtype=numpy.float32)
    pixels *= numpy.array(rgba, dtype=numpy.float32)
    return Image.fromarray(pixels.round().astype(numpy.uint8))

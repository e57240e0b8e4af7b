import pathlib
import sys
import tomllib

from fracrating.common.structs import (
    DefaultStyle,
    RatingConfig,
)
from fracrating.common import meta
from fracrating.modules import (
    colors,
    glyphs,
)

default_path = meta.data_path / "rating.toml"


def load_config(path: str | pathlib.Path = None):
    path = pathlib.Path(path or default_path)
    if not path.exists():
        return RatingConfig()
    try:
        with open(path, "rb") as file:
            options = tomllib.load(file)
        icon = None
        if icon_font := options.get("icon_font"):
            icon = glyphs.TextGlyph(options.get("icon", "★"), font_path=icon_font)
        return RatingConfig(
            count       = int(options.get("count", DefaultStyle.count)),
            size        = options.get("size", DefaultStyle.size),
            spacing     = options.get("spacing", DefaultStyle.spacing),
            color       = colors.hex_to_rgba_0_1(options.get("color", DefaultStyle.color)),
            empty_color = colors.hex_to_rgba_0_1(options.get("empty_color", DefaultStyle.empty_color)),
            icon        = icon,
            read_only   = bool(options.get("read_only", False)),
            clearable   = bool(options.get("clearable", False)),
        )
    except Exception as exc:
        print(f"Could not load {path}, using defaults: {type(exc).__name__}: {exc}", file=sys.stderr)
        return RatingConfig()

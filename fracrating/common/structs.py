import dataclasses
import enum
import typing

from fracrating.common import fill


class Interaction(enum.Enum):
    Idle = "idle"
    Previewing = "previewing"


class KeyIntent(enum.Enum):
    increase = "increase"
    decrease = "decrease"

    @property
    def step(self):
        return +1 if self is KeyIntent.increase else -1


class DefaultStyle:
    color       = "#FFC107"
    empty_color = "#E0E0E0"
    count       = 5
    size        = 24
    spacing     = 4


@dataclasses.dataclass(slots=True)
class RatingConfig:
    count       : int             = DefaultStyle.count
    size        : int | float     = DefaultStyle.size
    spacing     : int | float     = DefaultStyle.spacing
    color       : str | tuple     = DefaultStyle.color
    empty_color : str | tuple     = DefaultStyle.empty_color
    icon        : typing.Any      = None
    empty_icon  : typing.Any      = None
    read_only   : bool            = False
    clearable   : bool            = False

    def __post_init__(self):
        from fracrating.modules import colors, glyphs
        if self.icon is None:
            self.icon = glyphs.star()
        self.color = colors.to_rgba(self.color)
        self.empty_color = colors.to_rgba(self.empty_color)

    @property
    def effective_empty_icon(self):
        # No dedicated empty glyph means both layers use the same one
        return self.empty_icon or self.icon


@dataclasses.dataclass(slots=True)
class Layer:
    glyph: typing.Any
    size: int | float
    tint: tuple[float, float, float, float]


@dataclasses.dataclass(slots=True)
class ClipRegion:
    width_percent: float
    size: int | float

    @property
    def visible_width(self):
        return fill.clip_width(self.width_percent, self.size)


@dataclasses.dataclass(slots=True)
class SlotComposite:
    background: Layer
    clip: ClipRegion
    foreground: Layer


@dataclasses.dataclass(slots=True)
class Accessibility:
    value_now: float
    value_max: int
    read_only: bool
    value_min: int = 0
    role: str = "slider"

    @property
    def focusable(self):
        return not self.read_only

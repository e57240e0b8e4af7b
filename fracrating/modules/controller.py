import dataclasses
import typing

from fracrating.common.structs import (
    Accessibility,
    Interaction,
    KeyIntent,
    RatingConfig,
)
from fracrating.common import (
    fill,
    meta,
)
from fracrating.modules import slot


class RatingController:
    """Interaction policy for one rating row.

    The committed value always belongs to the caller and is passed into
    every call that needs it, the controller only ever proposes new values
    through ``on_change``. The one piece of state kept here is the hover
    preview, which lives between a pointer entering a slot and the pointer
    leaving the whole row.
    """

    def __init__(self, config: RatingConfig = None, on_change: typing.Callable[[float], None] = None, name: str = ""):
        self.config: RatingConfig = config or RatingConfig()
        self.on_change: typing.Callable[[float], None] = on_change
        self.name: str = name
        self.state: Interaction = Interaction.Idle
        self.hover_index: int = None

    @property
    def interactive(self):
        return not self.config.read_only

    @property
    def committable(self):
        return self.interactive and self.on_change is not None

    @property
    def hover_value(self):
        if self.state is Interaction.Previewing:
            return self.hover_index + 1
        return None

    def configure(self, **changes):
        self.config = dataclasses.replace(self.config, **changes)
        # Disabled widgets, or slots that no longer exist, cannot stay previewed
        if not self.interactive or (self.hover_index is not None and self.hover_index >= self.config.count):
            self.pointer_leave(force=True)

    # Hover preview

    def pointer_enter(self, index: int):
        if not self.interactive:
            return
        if not 0 <= index < self.config.count:
            return
        if self.state is Interaction.Previewing and self.hover_index == index:
            return
        self.state = Interaction.Previewing
        self.hover_index = index
        if meta.debug:
            print(f"Rating {self.name!r}: previewing {self.hover_value}")

    def pointer_leave(self, force=False):
        if not self.interactive and not force:
            return
        if self.state is Interaction.Idle:
            return
        self.state = Interaction.Idle
        self.hover_index = None
        if meta.debug:
            print(f"Rating {self.name!r}: preview cleared")

    def track_pointer(self, index: int | None, inside: bool):
        # Immediate mode hosts sample the pointer every frame instead of
        # getting enter/leave events, gaps between slots keep the preview
        if not inside:
            self.pointer_leave()
        elif index is not None and index != self.hover_index:
            self.pointer_enter(index)

    # Commits

    def commit(self, value: float):
        value = min(max(value, 0), self.config.count)
        if meta.debug:
            print(f"Rating {self.name!r}: commit {value}")
        self.on_change(value)
        return value

    def click(self, index: int, value: float = None):
        if not self.committable:
            return None
        if not 0 <= index < self.config.count:
            return None
        new_value = index + 1
        if self.config.clearable and value == new_value:
            new_value = 0  # Clicking the current value resets the rating to 0
        return self.commit(new_value)

    def key(self, intent: KeyIntent, value: float):
        # Returns whether the host should skip its default handling of the key
        if not self.committable:
            return False
        if intent.step > 0:
            new_value = min(value + intent.step, self.config.count)
        else:
            new_value = max(value + intent.step, 0)
        if new_value == value:
            return False
        self.commit(new_value)
        return True

    # Derivation

    def display_value(self, value: float):
        hover_value = self.hover_value
        return value if hover_value is None else hover_value

    def fractions(self, value: float):
        return fill.slot_fractions(self.config.count, self.display_value(value))

    def render(self, value: float):
        config = self.config
        return [
            slot.render(
                config.icon,
                config.effective_empty_icon,
                fraction,
                config.size,
                config.color,
                config.empty_color,
            )
            for fraction in self.fractions(value)
        ]

    def accessibility(self, value: float):
        return Accessibility(
            value_now=value,
            value_max=self.config.count,
            read_only=self.config.read_only,
        )

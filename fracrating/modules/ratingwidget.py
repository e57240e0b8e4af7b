import imgui
import glfw

from fracrating.common.structs import (
    KeyIntent,
    RatingConfig,
)
from fracrating.common import fill
from fracrating.modules.controller import RatingController
from fracrating.modules import slot

key_intents = {
    glfw.KEY_RIGHT: KeyIntent.increase,
    glfw.KEY_LEFT:  KeyIntent.decrease,
}
controllers: dict[str, RatingController] = {}


def get_controller(id: str, **config):
    controller = controllers.get(id)
    if controller is None:
        controller = controllers[id] = RatingController(RatingConfig(**config), name=id)
    elif config:
        # Only rebuild the config when an option actually changed
        current = controller.config
        wanted = RatingConfig(**config)
        if any(getattr(current, key) != getattr(wanted, key) for key in config):
            controller.configure(**config)
    return controller


def ratingwidget(id: str, value: float, on_change=None, **config):
    controller = get_controller(id, **config)
    config = controller.config
    committed = []
    def commit(new_value: float):
        committed.append(new_value)
        if on_change:
            on_change(new_value)

    width = fill.row_width(config.count, config.size, config.spacing)
    if width <= 0:
        imgui.dummy(0, 0)
        return False, value
    controller.on_change = commit
    try:
        x, y = imgui.get_cursor_screen_pos()

        # Input pass: one item over the whole row, slots are hit tested by position
        if config.read_only:
            imgui.internal.push_item_flag(imgui.internal.ITEM_DISABLED, True)
        imgui.invisible_button(f"##{id}", width, config.size)
        hovered = imgui.is_item_hovered()
        clicked = imgui.is_item_clicked()
        focused = imgui.is_item_focused()
        if config.read_only:
            imgui.internal.pop_item_flag()

        mouse_x = imgui.get_io().mouse_pos.x
        index = fill.slot_at(mouse_x - x, config.count, config.size, config.spacing)
        controller.track_pointer(index, hovered)
        if hovered and not config.read_only:
            imgui.set_mouse_cursor(imgui.MOUSE_CURSOR_HAND)
        if clicked and index is not None:
            controller.click(index, value)
        if focused:
            for key, intent in key_intents.items():
                if imgui.is_key_pressed(key, repeat=True):
                    controller.key(intent, committed[-1] if committed else value)

        # Render pass, with the preview or commit from this frame already applied
        if committed:
            value = committed[-1]
        draw_list = imgui.get_window_draw_list()
        for i, composite in enumerate(controller.render(value)):
            slot.draw(draw_list, x + i * (config.size + config.spacing), y, composite)
    finally:
        controller.on_change = None
    return bool(committed), value

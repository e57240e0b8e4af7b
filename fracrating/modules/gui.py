from imgui.integrations.glfw import GlfwRenderer
import OpenGL.GL as gl
import imgui
import glfw
import sys

from fracrating.common.structs import RatingConfig
from fracrating.common import meta
from fracrating.modules import (
    colors,
    glyphs,
    ratingwidget,
)

heart = glyphs.PolygonGlyph([
    (0.50, 0.92), (0.12, 0.52), (0.06, 0.32), (0.14, 0.14), (0.32, 0.08),
    (0.50, 0.22), (0.68, 0.08), (0.86, 0.14), (0.94, 0.32), (0.88, 0.52),
])


class DemoGUI:
    def __init__(self, config: RatingConfig):
        self.config = config
        self.ratings = {
            "editable": 3.0,
            "ten": 6.0,
            "hearts": 2.0,
        }
        self.last_commit = None

        # Setup GLFW
        if not glfw.init():
            print("Could not initialize OpenGL context")
            sys.exit(1)
        glfw.window_hint(glfw.CONTEXT_VERSION_MAJOR, 3)
        glfw.window_hint(glfw.CONTEXT_VERSION_MINOR, 3)
        glfw.window_hint(glfw.OPENGL_PROFILE, glfw.OPENGL_CORE_PROFILE)
        glfw.window_hint(glfw.OPENGL_FORWARD_COMPAT, gl.GL_TRUE)  # OS X supports only forward-compatible core profiles from 3.2

        # Create a windowed mode window and its OpenGL context
        self.window: glfw._GLFWwindow = glfw.create_window(560, 360, f"FracRating {meta.version}", None, None)
        if not self.window:
            print("Could not initialize Window")
            glfw.terminate()
            sys.exit(1)
        glfw.make_context_current(self.window)
        imgui.create_context()
        self.impl = GlfwRenderer(self.window)
        imgui.get_io().config_flags |= imgui.CONFIG_NAV_ENABLE_KEYBOARD
        imgui.get_style().colors[imgui.COLOR_WINDOW_BACKGROUND] = colors.hex_to_rgba_0_1("#101010")

    def row(self, label: str, id: str, **config):
        imgui.text(label)
        imgui.same_line(position=170)
        changed, value = ratingwidget.ratingwidget(id, self.ratings[id], **config)
        if changed:
            self.ratings[id] = value
            self.last_commit = (id, value)
        imgui.same_line()
        imgui.text(f"{self.ratings[id]:g}")

    def draw(self):
        io = imgui.get_io()
        imgui.set_next_window_position(0, 0)
        imgui.set_next_window_size(io.display_size.x, io.display_size.y)
        imgui.begin("##main", flags=imgui.WINDOW_NO_DECORATION | imgui.WINDOW_NO_MOVE | imgui.WINDOW_NO_SAVED_SETTINGS)
        base = dict(
            size=self.config.size,
            spacing=self.config.spacing,
            color=self.config.color,
            empty_color=self.config.empty_color,
            icon=self.config.icon,
            clearable=self.config.clearable,
        )
        self.row("Editable:", "editable", **base, count=self.config.count, read_only=self.config.read_only)
        self.row("Ten slots:", "ten", **base | dict(size=self.config.size * 0.75), count=10)
        self.row("Hearts:", "hearts", **base | dict(icon=heart, color="#E53935"), count=self.config.count)
        imgui.text("Read only:")
        imgui.same_line(position=170)
        ratingwidget.ratingwidget("readonly", 3.4, **base, count=5, read_only=True)
        imgui.same_line()
        imgui.text("3.4")
        imgui.separator()
        if self.last_commit:
            id, value = self.last_commit
            imgui.text(f"Last commit: {id} -> {value:g}")
        else:
            imgui.text("Hover to preview, click or use Left / Right to commit")
        imgui.end()

    def main_loop(self):
        try:
            while not glfw.window_should_close(self.window):
                glfw.poll_events()
                self.impl.process_inputs()
                imgui.new_frame()
                self.draw()
                imgui.render()
                gl.glClearColor(0, 0, 0, 1)
                gl.glClear(gl.GL_COLOR_BUFFER_BIT)
                self.impl.render(imgui.get_draw_data())
                glfw.swap_buffers(self.window)
        finally:
            self.impl.shutdown()
            glfw.terminate()

from PIL import Image
import OpenGL.GL as gl


class Texture:
    def __init__(self, image: Image.Image):
        self.width, self.height = image.size
        self.data: bytes = self.get_rgba_pixels(image)
        self.applied: bool = False
        self._texture_id = None

    @staticmethod
    def get_rgba_pixels(image: Image.Image):
        if image.mode == "RGB":
            return image.tobytes("raw", "RGBX")
        else:
            if image.mode != "RGBA":
                image = image.convert("RGBA")
            return image.tobytes("raw", "RGBA")

    def apply(self):
        gl.glBindTexture(gl.GL_TEXTURE_2D, self._texture_id)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_LINEAR)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_LINEAR)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_CLAMP_TO_EDGE)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_CLAMP_TO_EDGE)
        gl.glTexImage2D(gl.GL_TEXTURE_2D, 0, gl.GL_RGBA, self.width, self.height, 0, gl.GL_RGBA, gl.GL_UNSIGNED_BYTE, self.data)
        self.applied = True

    @property
    def texture_id(self):
        # Needs a current GL context, so only ever touched while drawing
        if self._texture_id is None:
            self._texture_id = gl.glGenTextures(1)
        if not self.applied:
            self.apply()
        return self._texture_id

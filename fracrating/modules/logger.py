import pathlib
import sys
import re
import os

# pythonw and frozen GUI builds can start without streams
for stream in ("stdout", "stderr"):
    if getattr(sys, stream) is None:
        setattr(sys, stream, open(os.devnull, "w"))

_stdout = sys.stdout
_stderr = sys.stderr
_path: pathlib.Path = None
_ansi_escape = re.compile(r"\x1b\[[0-9;]*m")


def _file_write(message: str):
    if _path is None:
        return
    with open(_path, "a", encoding="utf-8") as log:
        log.write(_ansi_escape.sub("", message))


class _Tee:
    def __init__(self, stream):
        self.stream = stream

    def write(self, message):
        self.stream.write(message)
        _file_write(message)

    def __getattr__(self, name):
        return getattr(self.stream, name)


def install(path: str | pathlib.Path):
    global _path, _stdout, _stderr
    _stdout = sys.stdout
    _stderr = sys.stderr
    _path = pathlib.Path(path)
    _path.parent.mkdir(parents=True, exist_ok=True)
    # Create / clear log file
    _path.write_text("", encoding="utf-8")
    sys.stdout = _Tee(_stdout)
    sys.stderr = _Tee(_stderr)


def uninstall():
    global _path
    _path = None
    sys.stdout = _stdout
    sys.stderr = _stderr

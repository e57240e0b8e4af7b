import os
import pathlib
import sys

version = "1.2"

debug = bool(os.environ.get("FRACRATING_DEBUG"))

if sys.platform.startswith("win"):
    data_path = pathlib.Path.home() / "AppData/Roaming/fracrating"
elif sys.platform.startswith("darwin"):
    data_path = pathlib.Path.home() / "Library/Application Support/fracrating"
else:
    data_path = pathlib.Path.home() / ".config/fracrating"

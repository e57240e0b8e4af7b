#!/usr/bin/env python
import traceback
import sys

from fracrating.common import meta


def pop_option(args: list[str], name: str):
    # Removes "--name VALUE" from args and returns VALUE
    if name not in args:
        return None
    i = args.index(name)
    if i + 1 >= len(args):
        args.pop(i)
        return None
    value = args[i + 1]
    del args[i:i + 2]
    return value


def render(args: list[str]):
    from fracrating.modules.controller import RatingController
    from fracrating.modules import config, raster
    args = list(args)
    config_path = pop_option(args, "--config")
    if len(args) < 2:
        print("Usage: fracrating render OUT.png VALUE [COUNT] [--config PATH]", file=sys.stderr)
        return 2
    path, value = args[0], float(args[1])
    rating_config = config.load_config(config_path)
    if len(args) > 2:
        rating_config.count = int(args[2])
    image = raster.row_image(RatingController(rating_config), value)
    if image.width == 0:
        print(f"Nothing to render for {rating_config.count} slots, {path} not written")
        return 0
    image.save(path)
    print(f"Saved {value:g}/{rating_config.count} rating to {path}")
    return 0


def main(args: list[str]):
    from fracrating.modules import config, gui
    window = gui.DemoGUI(config.load_config(pop_option(list(args), "--config")))
    window.main_loop()
    return 0


def _start():
    from fracrating.modules import logger
    if not meta.debug:
        logger.install(meta.data_path / "log.txt")

    try:
        if "render" in sys.argv:
            i = sys.argv.index("render")
            sys.exit(render(sys.argv[i + 1:]))
        else:
            sys.exit(main(sys.argv[1:]))
    except KeyboardInterrupt:
        pass
    except Exception as exc:
        traceback.print_exc()
        print(f"Unhandled exception: {type(exc).__name__}: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    _start()

import sys

from .builder import build_site
from .config import get_config_path_from_args, load_config
from .errors import StructuralError
from .events import BuildLog
from .watch import watch

WATCH_FLAG = "--watch"


def main(argv=None):
    """
    python build.py [config.yml] [--watch]

    One full build, then exit; with --watch, keep rebuilding (without
    the clean step) whenever a source file changes or is added.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    watch_mode = WATCH_FLAG in args

    unknown = [a for a in args if a.startswith("-") and a != WATCH_FLAG]
    if unknown:
        print(f"Unknown option: {unknown[0]}", file=sys.stderr)
        print(f"usage: build.py [config.yml] [{WATCH_FLAG}]", file=sys.stderr)
        sys.exit(2)

    # 1. Config
    config_path = get_config_path_from_args(args)
    cfg = load_config(config_path)
    log = BuildLog()

    # 2. Full build
    if watch_mode:
        log.emit("info", "Starting watch mode...")
    try:
        build_site(cfg, clean=True, log=log)
    except StructuralError as e:
        print(f"Build failed: {e}", file=sys.stderr)
        sys.exit(1)

    # 3. Incremental rebuilds
    if watch_mode:
        watch(cfg, log)


if __name__ == "__main__":
    main()

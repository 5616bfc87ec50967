import os
import sys

from src.config.paths import DEFAULT_ROOT, FrameworkPaths
from src.runner.execution import run_all
from src.setup.initializer import initialize_environment

BANNER = r"""
==============================================
   SACRED FRAMEWORK  :: 3 - 6 - 9
   Neural | Speech | Image | Energy
==============================================
"""


def clear_screen():
    os.system("cls" if os.name == "nt" else "clear")


def print_banner():
    print(BANNER, flush=True)


def main(root=DEFAULT_ROOT) -> int:
    clear_screen()
    print_banner()

    paths = FrameworkPaths.from_root(root)
    try:
        logger = initialize_environment(paths)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    run_all(paths, logger)
    return 0


if __name__ == "__main__":
    sys.exit(main())

# SPDX-License-Identifier: MIT

from daycal.cleanup import register_cleanup
from daycal.terminal.app import run


def main() -> None:
    register_cleanup()
    run()


if __name__ == "__main__":
    main()

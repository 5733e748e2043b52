# SPDX-License-Identifier: MIT

import logging

from habitlog.initialize import initialize
from habitlog.terminal.app import run


def main() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
    initialize()
    run()


if __name__ == "__main__":
    main()

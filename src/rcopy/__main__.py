# SPDX-License-Identifier: Apache-2.0

"""Allow running the command as python -m rcopy."""

from rcopy.cli import main

if __name__ == "__main__":
    main(prog_name="rcopy")

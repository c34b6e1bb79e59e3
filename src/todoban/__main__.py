"""Entry point for todoban CLI."""

import sys

from todoban.cli import build_parser, run
from todoban.errors import TodobanError


def main():
    args = build_parser().parse_args()
    try:
        code = run(args)
    except TodobanError as e:
        print(f"error: {e}", file=sys.stderr)
        code = e.exit_code
    except (EOFError, KeyboardInterrupt):
        # Input closed or Ctrl-C: end the session like choosing 0
        print()
        code = 0
    sys.exit(code)


if __name__ == "__main__":
    main()

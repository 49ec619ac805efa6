from __future__ import annotations

import argparse

from mazegrid.cli import validate_grids


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Maze grid backend CLI")
    parser.add_argument("command", choices=["validate-grids"], help="Command to execute")
    args, remaining = parser.parse_known_args(argv)

    if args.command == "validate-grids":
        return validate_grids.main(remaining)

    return 1


if __name__ == "__main__":
    raise SystemExit(main())

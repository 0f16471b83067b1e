"""Inngangspunkt for kontoutskrift."""

from __future__ import annotations


def main() -> int:
    """Start kommandolinjen med sen import av CLI-modulen."""

    from kontoutskrift.cli import main as cli_main

    return cli_main()


if __name__ == "__main__":
    raise SystemExit(main())

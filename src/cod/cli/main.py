"""Main CLI entry point."""

import sys


def main() -> None:
    """Main CLI entry point."""
    try:
        from cod.cli.app import create_app
        app = create_app()
    except ImportError as exc:
        print(exc, file=sys.stderr)
        print("Library usage:", file=sys.stderr)
        print("  python -c \"import cod; cod.line((0, 0), (10, 5), '*'); cod.flush()\"", file=sys.stderr)
        sys.exit(1)
    app()


if __name__ == "__main__":
    main()

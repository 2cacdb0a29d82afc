"""Module entry point for `python -m appwrite_schema_exporter`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

"""Allow ``python -m openapi_lint``."""

from openapi_lint.cli import main

if __name__ == "__main__":  # pragma: no cover
    main()

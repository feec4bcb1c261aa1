"""Allow ``python -m grid_compositor``."""

from grid_compositor.cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

"""Allow ``python -m js_to_ts``."""

from .cli import app

if __name__ == "__main__":
    app()

"""Allow `python -m packpin ...`."""

from packpin.cli.main import app

if __name__ == "__main__":
    app()

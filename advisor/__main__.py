"""Allow running the CLI with `python -m advisor`."""

from advisor.cli.app import run

if __name__ == "__main__":
    run()

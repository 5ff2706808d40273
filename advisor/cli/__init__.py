"""
CLI Client Module.

Command-line client built with Typer for managing advisor apps.

Architecture:
- Commands are tokenized by Typer, parsed into a typed Command
- The target app is resolved from --app and the .advisor settings file
- The dispatcher maps the Command onto one HTTP call (httpx)
- Results are printed as a single Success:/Failure: line or a Rich table

Usage:
    advisor --help
    advisor -a staging health
    advisor -a staging show people
"""

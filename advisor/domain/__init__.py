"""Command model, parser, and instance registry."""

"""Configuration, logging, and error types shared by the whole client."""

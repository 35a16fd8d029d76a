"""Core engine: logging, runtime loop and services."""

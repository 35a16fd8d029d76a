"""Rendering helpers: image loading, sprite animation and the scrolling background."""

"""Status text overlay."""

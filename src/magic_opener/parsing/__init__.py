"""Git remote URL parsing."""

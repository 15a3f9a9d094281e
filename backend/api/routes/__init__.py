"""Route modules that are not owned by a feature module."""

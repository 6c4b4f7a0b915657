"""Web application layer."""

"""Request bodies and handler helpers for the HTTP service."""

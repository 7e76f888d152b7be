"""File-backed application settings for the auction server."""

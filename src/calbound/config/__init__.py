"""Configuration layer — settings discovery, validation, and logging setup."""

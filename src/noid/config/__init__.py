"""Configuration layer — noid.toml discovery, settings, and logging."""

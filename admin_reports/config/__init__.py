"""Environment-backed configuration."""

"""Application wiring and configuration."""

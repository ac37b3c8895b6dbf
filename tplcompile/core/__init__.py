"""Settings, models and shared helpers."""

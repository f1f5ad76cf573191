"""Settings, startup validation and logging setup."""

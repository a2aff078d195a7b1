"""Activity events, event builders, roles, constants, errors and configuration for a submission service."""

__version__ = "0.1.0"

__all__ = ["activityevents", "events", "errors", "constants", "roles", "config"]
"""Core configuration and logging for the localization library."""

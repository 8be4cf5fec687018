"""Configuration and shared value objects."""

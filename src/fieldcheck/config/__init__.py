"""Configuration — validator settings and logging setup."""

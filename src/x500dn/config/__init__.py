"""Configuration loading, default locations, and derived settings."""

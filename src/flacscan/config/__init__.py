"""Configuration loading and path policy for flacscan."""

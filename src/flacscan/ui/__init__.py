"""User interfaces for flacscan."""

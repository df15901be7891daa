"""Feature packages for flacscan."""

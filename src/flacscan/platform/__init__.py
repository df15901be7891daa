"""Platform services shared by every feature."""

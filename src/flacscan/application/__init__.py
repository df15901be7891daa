"""Application layer orchestrating features for user interfaces."""

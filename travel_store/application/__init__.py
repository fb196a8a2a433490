"""Application layer - store facade and use-case services."""

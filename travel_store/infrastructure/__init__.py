"""Infrastructure layer - storage media, repositories and wiring."""

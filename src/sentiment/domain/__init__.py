"""Domain models for characters and their rules state."""

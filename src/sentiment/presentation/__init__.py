"""Plain-text presentation of roll results."""

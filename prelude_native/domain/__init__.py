"""Domain layer: the native document model and its construction rules."""

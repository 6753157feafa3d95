"""Application layer: parse use case, request/response models and ports."""

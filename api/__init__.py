"""api/ -- FastAPI application, error envelopes and response models."""

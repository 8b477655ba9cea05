"""Application layer - demo registration, execution and results."""

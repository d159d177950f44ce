"""Option, document and API models."""

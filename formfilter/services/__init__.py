"""Service layer for the filtered responses pipeline."""

"""HTTP API for landscape generation."""

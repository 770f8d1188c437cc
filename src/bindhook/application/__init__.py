"""Application layer: transform pipeline, deploy cycle, reporting."""

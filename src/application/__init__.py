"""Application layer: configuration, orchestration and the command line."""

"""Domain layer: submission records and pure sync logic."""

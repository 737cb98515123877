"""Domain layer shared by all examples."""

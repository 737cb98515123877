"""Open/closed principle example."""

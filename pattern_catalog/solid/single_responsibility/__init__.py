"""Single-responsibility principle example."""

"""Technical infrastructure shared by the examples."""

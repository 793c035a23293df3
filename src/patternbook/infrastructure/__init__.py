"""Technical infrastructure shared by the demos."""

"""Campus resource booking API."""

"""Request and response contracts for the HTTP layer."""

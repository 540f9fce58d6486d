"""Learning progress bounded context - Application layer."""

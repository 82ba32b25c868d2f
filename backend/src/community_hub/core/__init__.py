"""Core infrastructure: configuration, database, logging, errors and HTTP plumbing."""

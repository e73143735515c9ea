"""Core infrastructure: configuration, logging, errors and the data store."""

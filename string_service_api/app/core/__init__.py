"""Configuration, logging, errors and the request dispatcher."""

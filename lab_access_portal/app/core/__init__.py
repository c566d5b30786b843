"""Configuration, logging, errors, storage and credential checks."""

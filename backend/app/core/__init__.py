"""Application core: configuration, errors, security, dependencies."""

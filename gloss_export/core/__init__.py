"""Core domain models, ports, configuration, and logging."""

"""Core: configuration, domain tables and query resolution."""

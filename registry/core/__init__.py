"""
Core utilities shared across the account registry.

This package hosts:
- configuration helpers (env vars, default data file)
- the error taxonomy raised by storage and services
- logging setup for the command line entry points

Domain, repositories and services depend on these primitives instead of
reading os.environ or configuring handlers themselves.
"""

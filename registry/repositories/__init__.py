"""
Persistence adapters.

These modules encapsulate how the registry is stored/retrieved (today a single
JSON file). Services depend on these helpers rather than touching the file.
"""

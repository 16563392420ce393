"""
High-level use cases for the account registry.

Service modules orchestrate domain objects and repositories (add accounts,
toggle services, query enrollment, load/save the registry file). Scripts call
these services instead of manipulating the JSON document directly.
"""

"""Domain layer — symbol table, rule predicates, and the parse result model.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""

"""
Catalog Application Layer

Use cases orchestrating Category and Genre aggregates through gateway ports.
"""

"""
Catalog Use Cases
"""

"""
Catalog Domain

Categories and genres of the video catalog administration.
"""

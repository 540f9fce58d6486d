"""
Guides bounded context - Application layer.

Use cases for the guide lifecycle, pages, likes, challenges and guide queries.
"""

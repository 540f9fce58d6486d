"""
Courses bounded context - Application layer.

Use cases for the course lifecycle, guide association and course queries.
"""

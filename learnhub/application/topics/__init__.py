"""
Topics bounded context - Application layer.

Use cases for the topic registry shared by guides and courses.
"""

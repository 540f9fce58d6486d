"""
Domain layer.

The domain layer contains the business rules of learnhub: guides and their
pages, courses, topics, enrollments and learning progress. It has no
dependencies on external frameworks or infrastructure.
"""

"""learnhub: learning-content management core (guides, courses, topics, enrollments, progress)."""

__version__ = "0.1.0"

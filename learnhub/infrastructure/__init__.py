"""
Infrastructure layer.

SQLAlchemy repositories and mappers, the SQLAlchemy unit of work and the
event publisher adapters.
"""

"""Enrollments bounded context - Application layer."""

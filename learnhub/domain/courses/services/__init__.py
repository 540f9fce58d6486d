from .course_details_aggregator import CourseDetails, aggregate_course_details

__all__ = ["CourseDetails", "aggregate_course_details"]

from .base import BaseGolfModel
from .course import Course, format_course_name, is_user_added_course, parse_course_name
from .hole import Hole
from .rating import RatingEstimate
from .seo import RouteSEO, SitemapUrl
from .tee import HOLES_PER_TEE, Tee, new_tee_id

__all__ = [
    "BaseGolfModel",
    "Course",
    "Hole",
    "RatingEstimate",
    "RouteSEO",
    "SitemapUrl",
    "Tee",
    "HOLES_PER_TEE",
    "new_tee_id",
    "parse_course_name",
    "format_course_name",
    "is_user_added_course",
]

"""Course feature module — checkpoints, map path, position interpolation."""

from .models import Course, CourseCheckpoint, Position
from .interpolation import interpolate_position, validate_course
from .loader import get_course, load_course, load_course_gpx, load_course_yaml
from .seoul import SEOUL_COURSE, SEOUL_COURSE_CHECKPOINTS

__all__ = [
    "Course",
    "CourseCheckpoint",
    "Position",
    "interpolate_position",
    "validate_course",
    "get_course",
    "load_course",
    "load_course_gpx",
    "load_course_yaml",
    "SEOUL_COURSE",
    "SEOUL_COURSE_CHECKPOINTS",
]

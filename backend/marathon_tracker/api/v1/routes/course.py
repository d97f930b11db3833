"""
Course API Routes

Checkpoints and map path of the configured course.
"""

from fastapi import APIRouter, Depends

from marathon_tracker.features.course import Course, get_course
from marathon_tracker.schemas.common import CamelModel, LatLngSchema

router = APIRouter()


class CourseCheckpointSchema(CamelModel):
    name: str
    distance: str
    distance_km: float
    lat: float
    lng: float


class CourseSchema(CamelModel):
    name: str
    finish_km: float
    checkpoints: list[CourseCheckpointSchema] = []
    path: list[LatLngSchema] = []


@router.get("", response_model=CourseSchema)
async def get_course_info(course: Course = Depends(get_course)):
    """Get course checkpoints and path for map rendering."""
    return CourseSchema(
        name=course.name,
        finish_km=course.finish_km,
        checkpoints=[
            CourseCheckpointSchema(
                name=cp.name,
                distance=cp.distance_label,
                distance_km=cp.distance_km,
                lat=cp.lat,
                lng=cp.lng,
            )
            for cp in course.checkpoints
        ],
        path=[LatLngSchema(lat=p.lat, lng=p.lng) for p in course.path],
    )

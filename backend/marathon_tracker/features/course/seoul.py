"""Built-in course: Seoul marathon (approximate coordinates)."""

from __future__ import annotations

from .models import Course, CourseCheckpoint, Position

SEOUL_COURSE_CHECKPOINTS: tuple[CourseCheckpoint, ...] = (
    CourseCheckpoint("스타트(상암월드컵공원)", "0km", 0.0, 37.5683, 126.8970),
    CourseCheckpoint("광화문 세종대로", "~12km", 12.0, 37.5720, 126.9769),
    CourseCheckpoint("신설동역", "~16km", 16.0, 37.5753, 127.0250),
    CourseCheckpoint("군자역 사거리", "~20km", 20.0, 37.5551, 127.0813),
    CourseCheckpoint("학여울역", "~30km", 30.0, 37.4967, 127.0709),
    CourseCheckpoint("수서IC", "~34km", 34.0, 37.4833, 127.0930),
    CourseCheckpoint("피니시(올림픽공원)", "42.195km", 42.195, 37.5152, 127.1213),
)

# Sangam -> Gwanghwamun -> Gunja
_PATH_A = (
    (37.5683, 126.8970),
    (37.5664, 126.9025),
    (37.5610, 126.9083),
    (37.5535, 126.9135),
    (37.5442, 126.9208),
    (37.5348, 126.9282),
    (37.5285, 126.9349),  # Yeouido park
    (37.5418, 126.9499),  # Gongdeok
    (37.5513, 126.9606),
    (37.5595, 126.9690),
    (37.5694, 126.9749),
    (37.5720, 126.9769),  # Gwanghwamun
    (37.5723, 126.9838),
    (37.5729, 126.9915),
    (37.5737, 127.0010),
    (37.5745, 127.0110),
    (37.5753, 127.0250),  # Sinseol-dong
    (37.5714, 127.0400),
    (37.5656, 127.0510),
    (37.5580, 127.0650),
    (37.5551, 127.0813),  # Gunja
)

# Gunja -> Suseo IC -> Olympic Park
_PATH_B = (
    (37.5490, 127.0945),
    (37.5438, 127.1010),
    (37.5382, 127.1075),
    (37.5324, 127.1120),
    (37.5250, 127.1145),
    (37.5188, 127.1129),  # Jamsil north
    (37.5098, 127.1040),
    (37.5018, 127.0908),
    (37.4967, 127.0709),  # Hangnyeoul
    (37.4902, 127.0799),
    (37.4851, 127.0895),
    (37.4833, 127.0930),  # Suseo IC
    (37.4869, 127.1049),
    (37.4925, 127.1160),
    (37.5002, 127.1248),
    (37.5075, 127.1298),
    (37.5131, 127.1315),
    (37.5168, 127.1279),
    (37.5152, 127.1213),  # Olympic Park finish
)

SEOUL_COURSE = Course(
    name="Seoul Marathon",
    checkpoints=SEOUL_COURSE_CHECKPOINTS,
    path=tuple(Position(lat, lng) for lat, lng in _PATH_A + _PATH_B),
)

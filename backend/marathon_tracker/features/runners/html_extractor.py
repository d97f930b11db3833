"""Result page parser for rendered per-bib pages (myresult.co.kr layout).

Checkpoint table layout: 구간명 | 통과시간 | 구간기록 | 누적기록
(checkpoint, clock time, split, cumulative time).
"""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup

from marathon_tracker.shared.constants import (
    DEFAULT_CATEGORY,
    HALF_MARATHON_DISTANCE_KM,
    MARATHON_DISTANCE_KM,
)
from marathon_tracker.shared.parsers import is_clock_time

from .errors import ParseError
from .models import CheckpointRecord, Extraction

logger = logging.getLogger(__name__)

# Tried in order, first acceptable text wins
NAME_SELECTORS = (
    "h2, h3, .name, .runner-name",
    "td, th",
)
CATEGORY_SELECTOR = "h2, h3, .category, .course"

# Korean name: 2-5 Hangul syllables
NAME_PATTERN = re.compile(r"^[가-힣]{2,5}$")
NOT_A_NAME = {
    "남자", "여자",
    "출발", "도착", "하프",
    "구간명", "통과시간", "구간기록", "누적기록",
    "이름", "성별", "배번", "소속", "순위", "기록", "코스", "종목",
}

CHECKPOINT_NAME_PATTERN = re.compile(
    r"^(출발|도착|start|finish)$|하프|half|\d+(?:\.\d+)?\s*km?",
    re.IGNORECASE,
)

# Normalized checkpoint token -> distance label
CHECKPOINT_DISTANCES: dict[str, str] = {
    "출발": "0km",
    "START": "0km",
    "5K": "5km",
    "10K": "10km",
    "15K": "15km",
    "20K": "20km",
    "하프": f"{HALF_MARATHON_DISTANCE_KM}km",
    "HALF": f"{HALF_MARATHON_DISTANCE_KM}km",
    "25K": "25km",
    "30K": "30km",
    "35K": "35km",
    "40K": "40km",
    "도착": f"{MARATHON_DISTANCE_KM}km",
    "FINISH": f"{MARATHON_DISTANCE_KM}km",
}
UNMAPPED_DISTANCE = "0km"

MIN_CHECKPOINT_CELLS = 4


def normalize_checkpoint_token(name: str) -> str:
    """Lookup key for a checkpoint name: ' 10 km ' -> '10K'."""
    token = re.sub(r"\s+", "", name).upper()
    if token.endswith("KM"):
        token = token[:-1]
    return token


def checkpoint_distance_label(name: str) -> str:
    """Distance label for a checkpoint name, "0km" when unknown."""
    return CHECKPOINT_DISTANCES.get(normalize_checkpoint_token(name), UNMAPPED_DISTANCE)


def is_checkpoint_name(name: str) -> bool:
    return bool(name) and CHECKPOINT_NAME_PATTERN.search(name) is not None


def extract_name(soup: BeautifulSoup) -> str:
    """Runner name, "" if the page shows none."""
    for selector in NAME_SELECTORS:
        for el in soup.select(selector):
            text = el.get_text(strip=True)
            if NAME_PATTERN.match(text) and text not in NOT_A_NAME:
                return text
    return ""


def extract_category(soup: BeautifulSoup) -> str:
    """Course category ("Full", "10K", "하프 코스", ...)."""
    for el in soup.select(CATEGORY_SELECTOR):
        text = el.get_text(strip=True)
        if text in ("Full", "10K") or "풀" in text or "하프" in text:
            return text
    return DEFAULT_CATEGORY


def extract_checkpoints(soup: BeautifulSoup) -> list[CheckpointRecord]:
    """Checkpoint rows of all tables, in page order."""
    checkpoints: list[CheckpointRecord] = []

    for row in soup.select("table tr"):
        # Header rows
        if row.find("th") is not None:
            continue

        cells = row.find_all("td")
        if len(cells) < MIN_CHECKPOINT_CELLS:
            continue

        name = cells[0].get_text(" ", strip=True)
        if not is_checkpoint_name(name):
            continue

        cumulative = cells[3].get_text(strip=True)
        passed = is_clock_time(cumulative)

        checkpoints.append(
            CheckpointRecord(
                name=name,
                distance_label=checkpoint_distance_label(name),
                time=cumulative if passed else None,
                passed=passed,
            )
        )

    return checkpoints


def parse_result_page(html: str, bib_number: str) -> Extraction:
    """
    Parse a rendered result page.

    Args:
        html: Page HTML after client-side rendering
        bib_number: Bib the page was requested for

    Returns:
        Extraction with checkpoints in page (race) order

    Raises:
        ParseError: No checkpoint rows, or none of them passed
    """
    soup = BeautifulSoup(html, "html.parser")

    checkpoints = extract_checkpoints(soup)
    if not checkpoints:
        logger.error(f"No checkpoint rows in result page for bib {bib_number}")
        raise ParseError()

    if not any(cp.passed for cp in checkpoints):
        logger.warning(
            f"Bib {bib_number}: {len(checkpoints)} checkpoint rows, none passed"
        )
        raise ParseError()

    return Extraction(
        bib_number=bib_number,
        name=extract_name(soup),
        category=extract_category(soup),
        checkpoints=tuple(checkpoints),
    )


"""Grouping of forecast samples into UTC calendar days."""

import logging
from collections import defaultdict
from datetime import date, timedelta, timezone
from typing import Dict, List, Sequence

from weather_tools.config import MAX_FORECAST_DAYS, MAX_SAMPLES_PER_DAY, MIN_FORECAST_DAYS
from weather_tools.weather.models import DailyBucket, ForecastSample

logger = logging.getLogger(__name__)


def utc_date(sample: ForecastSample) -> date:
    return sample.timestamp.astimezone(timezone.utc).date()


def bucket_by_day(
    samples: Sequence[ForecastSample],
    requested_days: int,
    reference_date: date,
    max_per_day: int = MAX_SAMPLES_PER_DAY
) -> List[DailyBucket]:
    """Group forecast samples into per-day buckets.

    Only samples whose UTC date falls in
    ``[reference_date, reference_date + requested_days)`` are kept. Buckets
    are returned in ascending date order, at most ``requested_days`` of them,
    each holding at most ``max_per_day`` samples in chronological order.

    Args:
        samples: Forecast samples, normally in provider (chronological) order
        requested_days: Number of days to cover, 1 to 5
        reference_date: First UTC date of the window
        max_per_day: Display cap per bucket

    Returns:
        List of daily buckets, empty when the window selects nothing

    Raises:
        ValueError: If requested_days is outside the provider horizon
    """
    if not MIN_FORECAST_DAYS <= requested_days <= MAX_FORECAST_DAYS:
        raise ValueError(
            f"requested_days must be between {MIN_FORECAST_DAYS} and "
            f"{MAX_FORECAST_DAYS}, got {requested_days}"
        )

    end_date = reference_date + timedelta(days=requested_days)
    daily_data: Dict[date, List[ForecastSample]] = defaultdict(list)

    for sample in samples:
        day = utc_date(sample)
        if reference_date <= day < end_date:
            daily_data[day].append(sample)

    buckets = []
    for day in sorted(daily_data)[:requested_days]:
        ordered = sorted(daily_data[day], key=lambda s: s.timestamp)
        buckets.append(DailyBucket(day=day, samples=ordered[:max_per_day]))

    logger.debug(
        f"Bucketed {len(samples)} samples into {len(buckets)} days from {reference_date}"
    )
    return buckets

"""
Series validation for data handed to models and evaluators.
"""

import math

from ..errors import InsufficientDataError, MalformedDataError, TemporalDataError
from .models import Series


def validate_series(series: Series, min_length: int = 1) -> None:
    """
    Check the structural invariants of a price series.

    Args:
        series: Points ordered oldest to newest
        min_length: Minimum number of points required

    Raises:
        InsufficientDataError: Fewer than min_length points
        MalformedDataError: Non-positive or non-finite price, negative volume
        TemporalDataError: Duplicate or decreasing dates
    """
    if len(series) < min_length:
        raise InsufficientDataError(
            f"Series needs at least {min_length} points, got {len(series)}",
            required_count=min_length,
            available_count=len(series),
        )

    previous = None
    for index, point in enumerate(series):
        if not math.isfinite(point.price) or point.price <= 0:
            raise MalformedDataError(
                f"Price at index {index} must be positive, got {point.price}",
                field="price",
                value=point.price,
                context={"index": index},
            )

        if point.volume < 0:
            raise MalformedDataError(
                f"Volume at index {index} must be non-negative, got {point.volume}",
                field="volume",
                value=point.volume,
                context={"index": index},
            )

        if previous is not None and point.date <= previous.date:
            raise TemporalDataError(
                f"Dates must be strictly increasing: {point.date} follows {previous.date}",
                index=index,
            )
        previous = point

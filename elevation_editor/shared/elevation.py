"""
Elevation processing utilities.

This is the SINGLE SOURCE OF TRUTH for elevation calculations.
"""
from typing import List, Sequence, Tuple

# 3-point window: one neighbour on each side
MEDIAN_WINDOW_SIZE = 3

# Changes smaller than this (meters) are GPS noise, not ascent/descent
ELEVATION_STEP_THRESHOLD = 2.5


def rolling_median(
    values: Sequence[float],
    window_size: int = MEDIAN_WINDOW_SIZE
) -> List[float]:
    """
    Rolling median over a sequence of values.

    Even window sizes are bumped to the next odd size. At the edges the
    window is clipped to the available values, so it becomes asymmetric
    and may hold an even number of values; those use the mean of the two
    middle values.

    Args:
        values: Raw values (e.g. elevations)
        window_size: Size of the rolling window

    Returns:
        Median values, same length as input

    Example: [1, 5, 3, 4, 2] with a window of 3 gives [3, 3, 4, 3, 3].
    """
    if not values:
        return []

    odd_window = max(1, window_size + 1 if window_size % 2 == 0 else window_size)
    half_window = odd_window // 2
    last = len(values) - 1

    result = []
    for i in range(len(values)):
        start = max(0, i - half_window)
        end = min(last, i + half_window)
        window = sorted(values[start:end + 1])
        mid = len(window) // 2

        if len(window) % 2 == 0:
            result.append((window[mid - 1] + window[mid]) / 2)
        else:
            result.append(window[mid])

    return result


def calculate_elevation_changes(
    elevations: Sequence[float],
    min_step: float = 0.0
) -> Tuple[float, float]:
    """
    Calculate total elevation gain and loss.

    Args:
        elevations: List of elevation values
        min_step: Steps with an absolute size below this are ignored

    Returns:
        Tuple of (gain_m, loss_m)
    """
    gain = 0.0
    loss = 0.0

    for i in range(1, len(elevations)):
        diff = elevations[i] - elevations[i - 1]
        if abs(diff) < min_step:
            continue
        if diff > 0:
            gain += diff
        else:
            loss += abs(diff)

    return gain, loss

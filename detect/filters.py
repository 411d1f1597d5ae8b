from __future__ import annotations

from typing import Optional, Sequence

import cv2
import numpy as np

# approxPolyDP tolerance as a fraction of the contour perimeter
APPROX_EPSILON_RATIO = 0.01
# A circle approximated at that tolerance keeps at least this many vertices
MIN_CIRCLE_VERTICES = 8

Contour = np.ndarray


def approx_vertex_count(
    contour: Contour, epsilon_ratio: float = APPROX_EPSILON_RATIO
) -> int:
    epsilon = epsilon_ratio * cv2.arcLength(contour, True)
    return len(cv2.approxPolyDP(contour, epsilon, True))


def is_circular(
    contour: Contour,
    min_vertices: int = MIN_CIRCLE_VERTICES,
    epsilon_ratio: float = APPROX_EPSILON_RATIO,
) -> bool:
    return approx_vertex_count(contour, epsilon_ratio) >= min_vertices


def filter_circular_contours(
    contours: Sequence[Contour],
    min_vertices: int = MIN_CIRCLE_VERTICES,
    epsilon_ratio: float = APPROX_EPSILON_RATIO,
) -> list[Contour]:
    """Keep contours whose polygon approximation has many vertices.

    Triangles, rectangles and other angular shapes collapse to a few
    vertices; circles (even partly occluded) do not.
    """
    output = []
    for contour in contours:
        if not is_circular(contour, min_vertices, epsilon_ratio):
            continue
        output.append(contour)
    return output


def select_largest_contour(contours: Sequence[Contour]) -> Optional[Contour]:
    """Contour with the largest enclosed area; the first one wins ties."""
    return max(contours, key=cv2.contourArea, default=None)

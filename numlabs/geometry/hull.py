"""Planar convex hull by gift wrapping (Jarvis march)."""

from __future__ import annotations

import numpy as np

from ..logging import get_logger

logger = get_logger(__name__)


def orientation(a, b, c) -> float:
    """Orientation of the turn ``a -> b -> c``.

    ``(b_y - a_y)(c_x - b_x) - (b_x - a_x)(c_y - b_y)``: negative for a
    counter-clockwise turn, positive for clockwise, zero when collinear.
    """
    return float((b[1] - a[1]) * (c[0] - b[0]) - (b[0] - a[0]) * (c[1] - b[1]))


def _as_points(points) -> np.ndarray:
    pts = np.asarray(points, dtype=float)
    if pts.size == 0:
        return pts.reshape(0, 2)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError(f"points must have shape (n, 2), got {pts.shape}")
    return pts


def convex_hull(points) -> np.ndarray:
    """Return the hull vertices of a 2D point set.

    Vertices are listed counter-clockwise starting at the leftmost point
    (lowest of the leftmost points on ties). Points lying on a hull edge are
    skipped: among collinear candidates the farthest one is taken. Fewer
    than three points, or a fully degenerate set, give an empty ``(0, 2)``
    array.

    Example
    -------
    >>> convex_hull([[0, 0], [1, 0], [1, 1], [0, 1], [0.5, 0.5]]).tolist()
    [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]]
    """
    pts = _as_points(points)
    n = len(pts)
    if n < 3:
        return np.empty((0, 2))

    start = int(np.lexsort((pts[:, 1], pts[:, 0]))[0])
    hull = [start]
    p = start
    while True:
        q = (p + 1) % n
        if np.array_equal(pts[q], pts[p]):
            q = next((i for i in range(n) if not np.array_equal(pts[i], pts[p])), p)
        for i in range(n):
            if np.array_equal(pts[i], pts[p]):
                continue
            turn = orientation(pts[p], pts[i], pts[q])
            if turn < 0:
                q = i
            elif turn == 0:
                di = np.sum((pts[i] - pts[p]) ** 2)
                dq = np.sum((pts[q] - pts[p]) ** 2)
                if di > dq:
                    q = i
        if q == start or np.array_equal(pts[q], pts[start]) or len(hull) > n:
            break
        hull.append(q)
        p = q

    if len(hull) < 3:
        logger.debug("degenerate point set: %d hull vertices", len(hull))
        return np.empty((0, 2))
    return pts[hull].copy()


def close_polygon(vertices) -> np.ndarray:
    """Append the first vertex so the polygon can be drawn as a closed line."""
    verts = _as_points(vertices)
    if len(verts) == 0:
        return verts
    return np.vstack([verts, verts[:1]])


def polygon_area(vertices) -> float:
    """Signed shoelace area; positive for counter-clockwise vertex order."""
    verts = _as_points(vertices)
    if len(verts) < 3:
        return 0.0
    x, y = verts[:, 0], verts[:, 1]
    return float(0.5 * (np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))))


__all__ = ["orientation", "convex_hull", "close_polygon", "polygon_area"]

#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
voidfill.spatial
~~~~~~~~~~~~~~~~

Fixed-radius neighbour search over (x, y, value) samples.

:copyright: (c) 2016 - 2026 Regents of the University of Colorado
:license: MIT, see LICENSE for more details.
"""

import logging
import numpy as np
from scipy.spatial import cKDTree

logger = logging.getLogger(__name__)


class FixedRadiusSearch:
    """Collect (x, y, value) samples and return those within `radius` of a point.

    Samples are buffered until the first search, when a cKDTree is built.
    Inserting after a search invalidates the tree; it is rebuilt on the
    next query.
    """

    def __init__(self, radius):
        self.radius = float(radius)
        if not self.radius > 0:
            raise ValueError(f"Search radius must be positive, got {radius!r}")

        self._xs = []
        self._ys = []
        self._values = []
        self._tree = None
        self._xy = None
        self._z = None

    def __len__(self):
        return sum(len(v) for v in self._values)

    def insert(self, x, y, value):
        self.extend([x], [y], [value])

    def extend(self, xs, ys, values):
        xs = np.asarray(xs, dtype=np.float64).ravel()
        ys = np.asarray(ys, dtype=np.float64).ravel()
        values = np.asarray(values, dtype=np.float64).ravel()
        if not (xs.size == ys.size == values.size):
            raise ValueError("xs, ys and values must be the same length")

        if xs.size == 0:
            return

        self._xs.append(xs)
        self._ys.append(ys)
        self._values.append(values)
        self._tree = None

    def _build(self):
        if self._values:
            self._xy = np.column_stack((np.concatenate(self._xs), np.concatenate(self._ys)))
            self._z = np.concatenate(self._values)
            self._tree = cKDTree(self._xy)
        else:
            self._xy = np.empty((0, 2))
            self._z = np.empty(0)
            self._tree = None

        logger.debug(f"Indexed {len(self._z)} samples (radius={self.radius})")

    def search_many(self, xs, ys):
        """Query several points at once.

        Returns a list with one (values, distances) pair of arrays per point.
        """

        xs = np.asarray(xs, dtype=np.float64).ravel()
        ys = np.broadcast_to(np.asarray(ys, dtype=np.float64), xs.shape)

        if self._tree is None:
            self._build()

        if self._tree is None:
            return [(np.empty(0), np.empty(0)) for _ in range(xs.size)]

        points = np.column_stack((xs, ys))
        neighbors = self._tree.query_ball_point(points, self.radius)

        results = []
        for (x, y), idx in zip(points, neighbors):
            idx = np.asarray(idx, dtype=np.intp)
            dists = np.hypot(self._xy[idx, 0] - x, self._xy[idx, 1] - y)
            results.append((self._z[idx], dists))

        return results

    def search(self, x, y):
        """All samples within the radius of (x, y) as (value, distance) tuples."""

        values, dists = self.search_many([x], [y])[0]
        return list(zip(values.tolist(), dists.tolist()))

#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
voidfill.fill_missing
~~~~~~~~~~~~~~~~~~~~~

Fill nodata holes in a grid with inverse-distance weighting.

Two passes over the grid:

1. Every valid cell with a nodata cell among its 8 neighbours is an edge
   cell and is added to a fixed-radius search index as (col, row, value).
2. Every nodata cell is estimated from the edge cells within the filter
   radius, each weighted by 1 / d**2. Valid cells are copied through.

The index is fully populated before the first query is made.

:copyright: (c) 2016 - 2026 Regents of the University of Colorado
:license: MIT, see LICENSE for more details.
"""

import time
import logging
import numpy as np

from .spatial import FixedRadiusSearch
from .utils import RowProgress, odd_filter_size

logger = logging.getLogger(__name__)

TOOL_NAME = "fill_missing_data"

## (dx, dy), clockwise from the upper-right
NEIGHBOR_OFFSETS = (
    (1, -1), (1, 0), (1, 1), (0, 1),
    (-1, 1), (-1, 0), (-1, -1), (0, -1),
)


def edge_mask(grid):
    """Boolean mask of valid cells touching at least one hole.

    Cells off the grid read as nodata, so valid cells on the outer
    border are always edge cells.
    """

    holes = grid.hole_mask()
    padded = np.pad(holes, 1, mode='constant', constant_values=True)

    touches_hole = np.zeros_like(holes)
    for dx, dy in NEIGHBOR_OFFSETS:
        touches_hole |= padded[1 + dy:1 + dy + grid.rows, 1 + dx:1 + dx + grid.columns]

    return touches_hole & ~holes


def find_edge_cells(grid, frs, progress=None, quiet=False):
    """Insert every edge cell of `grid` into the search index `frs`.

    Returns the number of samples inserted. With `quiet` the summary is
    logged at debug level.
    """

    mask = edge_mask(grid)
    reporter = RowProgress(grid.rows, "Finding edge cells", progress)

    n_edges = 0
    for row in range(grid.rows):
        cols = np.flatnonzero(mask[row])
        if cols.size:
            frs.extend(cols, np.full(cols.size, row), grid.data[row, cols])
            n_edges += cols.size

        reporter.update(row)

    log = logger.debug if quiet else logger.info
    log(f"Found {n_edges} edge cells")
    return n_edges


def idw_estimate(values, distances, empty=np.nan):
    """Inverse-square-distance weighted mean of `values`.

    Samples at distance 0 carry no weight. When nothing remains the
    `empty` value is returned.
    """

    values = np.asarray(values, dtype=np.float64)
    distances = np.asarray(distances, dtype=np.float64)

    keep = distances > 0
    if not np.any(keep):
        return empty

    weights = 1.0 / (distances[keep] * distances[keep])
    return float(np.sum(values[keep] * weights) / np.sum(weights))


def interpolate_holes(grid, frs, output=None, keep_holes=True, progress=None, quiet=False):
    """Copy valid cells of `grid` to `output` and estimate the holes.

    Args:
      grid : Grid
        The input grid, read only.
      frs : FixedRadiusSearch
        A fully populated index of edge cells.
      output : Grid, optional
        Destination grid of the same shape; allocated if not given.
      keep_holes : bool
        If True a hole with no edge cell in range stays nodata,
        otherwise it is written as 0.0.
      progress : callable, optional
        Called as progress(desc, percent).
      quiet : bool
        Log the unfilled-hole count at debug level.

    Returns:
      The output Grid.
    """

    if output is None:
        output = grid.like()
    elif output.data.shape != grid.data.shape:
        raise ValueError(f"Output shape {output.data.shape} does not match input {grid.data.shape}")

    empty = grid.nodata if keep_holes else 0.0
    holes = grid.hole_mask()
    reporter = RowProgress(grid.rows, "Interpolating data holes", progress)

    n_unfilled = 0
    for row in range(grid.rows):
        valid = ~holes[row]
        output.data[row, valid] = grid.data[row, valid]

        cols = np.flatnonzero(holes[row])
        if cols.size:
            for col, (values, dists) in zip(cols, frs.search_many(cols, row)):
                z = idw_estimate(values, dists, empty=None)
                if z is None:
                    z = empty
                    n_unfilled += 1

                output.set_value(row, col, z)

        reporter.update(row)

    if n_unfilled:
        log = logger.debug if quiet else logger.warning
        log(f"{n_unfilled} holes had no edge cells within {frs.radius} cells")

    return output


def provenance_entries(filter_size, elapsed):
    """Human-readable metadata describing a fill run."""

    return [
        f"Created by voidfill's {TOOL_NAME} tool",
        f"Filter size: {filter_size}",
        f"Elapsed Time (excluding I/O): {elapsed:.3f}s",
    ]


def fill_missing_data(grid, filter_size=11, keep_holes=True, progress=None, quiet=False):
    """Fill the holes of `grid`, returning a new Grid.

    The filter size is forced odd and used as the search radius, in cells.
    `quiet` drops the per-pass summaries to debug level, for callers
    that fill many blocks of one raster.
    """

    filter_size = odd_filter_size(filter_size)
    start = time.perf_counter()

    frs = FixedRadiusSearch(filter_size)
    find_edge_cells(grid, frs, progress=progress, quiet=quiet)
    output = interpolate_holes(grid, frs, keep_holes=keep_holes, progress=progress, quiet=quiet)

    elapsed = time.perf_counter() - start
    for entry in provenance_entries(filter_size, elapsed):
        output.add_metadata_entry(entry)

    return output

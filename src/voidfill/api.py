#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
voidfill.api
~~~~~~~~~~~~
High-level Python API for voidfill.
Fill the holes of a raster file without needing to construct a
fetchez pipeline.
"""

import logging

from voidfill.grid import Grid
from voidfill.fill_missing import fill_missing_data
from voidfill.utils import TqdmProgress

logger = logging.getLogger(__name__)


def fill_raster(src_fn, dst_fn, filter_size=11, keep_holes=True, verbose=False):
    """Fill the nodata holes of the raster `src_fn` and write `dst_fn`.

    Args:
        src_fn: Input raster path.
        dst_fn: Output raster path.
        filter_size: Search radius in cells; even values are bumped to odd.
        keep_holes: Leave holes with no edge cells in range as nodata
            (otherwise they are written as 0.0).
        verbose: Show progress bars.

    Returns:
        Grid: The filled grid, as written.

    Raises:
        GridReadError: the input could not be read; nothing was processed.
        GridWriteError: the output could not be written.
    """

    grid = Grid.open(src_fn)

    progress = TqdmProgress() if verbose else None
    try:
        filled = fill_missing_data(
            grid, filter_size=filter_size, keep_holes=keep_holes, progress=progress
        )
    finally:
        if progress is not None:
            progress.close()

    filled.save(dst_fn)
    return filled

#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
voidfill.processors.rasters.fill
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Fill nodata holes from their edge cells using inverse-distance weighting (idw)

:copyright: (c) 2016 - 2026 Regents of the University of Colorado
:license: MIT, see LICENSE for more details.
"""

import time
import logging
from fetchez.utils import str2bool

from .base import RasterHook
from ...grid import Grid, metadata_tags
from ...fill_missing import fill_missing_data, provenance_entries
from ...utils import odd_filter_size

logger = logging.getLogger(__name__)


class FillMissingData(RasterHook):
    """Fill NoData voids using Inverse Distance Weighting (IDW) of the
    cells bordering each void.

    The raster is processed block by block, each block buffered by
    `filter_size + 1` cells so the result matches a whole-raster run.

    Usage: --hook fill_missing_data:filter_size=11:keep_holes=true
    """

    name = "fill_missing_data"
    desc = "Fill nodata holes with idw of the hole edges."
    default_suffix = "_filled"

    def __init__(self, filter_size=11, keep_holes=True, progress=None, **kwargs):
        self.filter_size = odd_filter_size(filter_size)
        kwargs.setdefault("buffer", self.filter_size + 1)
        super().__init__(**kwargs)
        self.keep_holes = str2bool(keep_holes)
        self.progress = progress
        self.elapsed = 0.0

    def process_raster(self, src_path, dst_path, entry):
        self.elapsed = 0.0
        return super().process_raster(src_path, dst_path, entry)

    def process_chunk(self, data, ndv, entry, transform=None, window=None):
        start = time.perf_counter()

        grid = Grid(data, nodata=ndv)
        filled = fill_missing_data(
            grid,
            filter_size=self.filter_size,
            keep_holes=self.keep_holes,
            progress=self.progress,
            quiet=True,
        )

        self.elapsed += time.perf_counter() - start
        return filled.data

    def finalize(self, dst, entry):
        entries = provenance_entries(self.filter_size, self.elapsed)
        dst.update_tags(**metadata_tags(entries))
        logger.info(f"Filled {dst.name} in {self.elapsed:.3f}s")

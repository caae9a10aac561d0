#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
voidfill.grid
~~~~~~~~~~~~~

A single-band raster held in memory, with a nodata sentinel marking holes.
Reading and writing go through rasterio.

:copyright: (c) 2016 - 2026 Regents of the University of Colorado
:license: MIT, see LICENSE for more details.
"""

import logging
import numpy as np
import rasterio
from rasterio.errors import RasterioError
from fetchez.utils import float_or

logger = logging.getLogger(__name__)

DEFAULT_NODATA = -9999


class GridError(IOError):
    """Base class for raster I/O failures."""


class GridReadError(GridError):
    """The input raster could not be opened or read."""


class GridWriteError(GridError):
    """The output raster could not be written."""


def metadata_tags(entries):
    """Map metadata entries to dataset tags (METADATA_1, METADATA_2, ...)."""

    return {f"METADATA_{i}": str(entry) for i, entry in enumerate(entries, start=1)}


def is_nodata(values, nodata):
    """Boolean mask of `values` equal to the nodata sentinel."""

    values = np.asarray(values)
    if nodata is not None and np.isnan(nodata):
        return np.isnan(values)

    return values == nodata


class Grid:
    """A 2-D grid of float cells.

    Args:
      data : array-like
        Cell values, shape (rows, columns).
      nodata : float
        The sentinel marking holes.
      profile : dict, optional
        The rasterio profile of the source (driver, dtype, transform, crs...).
      metadata : list, optional
        Human-readable provenance entries written with the grid.
    """

    def __init__(self, data, nodata=DEFAULT_NODATA, profile=None, metadata=None):
        self.data = np.array(data, dtype=np.float64, ndmin=2)
        if self.data.ndim != 2:
            raise ValueError(f"Grid data must be 2-D, got shape {self.data.shape}")

        self.nodata = float_or(nodata, DEFAULT_NODATA)
        self.profile = dict(profile) if profile else {}
        self.metadata = list(metadata) if metadata else []

    def __repr__(self):
        return f"<Grid {self.rows}x{self.columns} nodata={self.nodata}>"

    @property
    def rows(self):
        return self.data.shape[0]

    @property
    def columns(self):
        return self.data.shape[1]

    def in_bounds(self, row, col):
        return 0 <= row < self.rows and 0 <= col < self.columns

    def value_at(self, row, col):
        """Cell value, or nodata when (row, col) falls off the grid."""

        if not self.in_bounds(row, col):
            return self.nodata

        return float(self.data[row, col])

    def set_value(self, row, col, value):
        self.data[row, col] = value

    def hole_mask(self):
        return is_nodata(self.data, self.nodata)

    def like(self):
        """A new grid with the same shape, profile and nodata, all holes."""

        return Grid(
            np.full(self.data.shape, self.nodata, dtype=np.float64),
            nodata=self.nodata,
            profile=self.profile,
        )

    def add_metadata_entry(self, entry):
        self.metadata.append(entry)

    @classmethod
    def open(cls, path, band=1):
        """Read one band of the raster at `path`."""

        try:
            with rasterio.open(path) as src:
                profile = src.profile.copy()
                nodata = float_or(src.nodata, DEFAULT_NODATA)
                data = src.read(band)
        except (RasterioError, OSError, IndexError) as e:
            raise GridReadError(f"Unable to read raster {path}: {e}") from e

        profile.update(count=1, nodata=nodata)
        logger.info(f"Read {data.shape[0]}x{data.shape[1]} grid from {path}")
        return cls(data, nodata=nodata, profile=profile)

    def save(self, path):
        """Write the grid and its metadata tags to `path`."""

        profile = self.profile.copy()
        profile.setdefault('driver', 'GTiff')
        profile.setdefault('dtype', 'float32')
        profile.update(
            count=1,
            height=self.rows,
            width=self.columns,
            nodata=self.nodata,
        )

        try:
            with rasterio.open(path, 'w', **profile) as dst:
                dst.write(self.data.astype(profile['dtype']), 1)
                if self.metadata:
                    dst.update_tags(**metadata_tags(self.metadata))
        except (RasterioError, OSError) as e:
            raise GridWriteError(f"Unable to write raster {path}: {e}") from e

        logger.info(f"Wrote grid to {path}")
        return path

#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
voidfill.processors.rasters.base
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Base classes for Raster operations.

:copyright: (c) 2016 - 2026 Regents of the University of Colorado
:license: MIT, see LICENSE for more details.
"""

import os
import logging
import rasterio
from rasterio.errors import RasterioError
from rasterio.windows import Window
from fetchez.hooks import FetchHook
from fetchez.utils import float_or

from ...grid import DEFAULT_NODATA, GridError, GridReadError, GridWriteError

logger = logging.getLogger(__name__)


class RasterHook(FetchHook):
    """Base class for hooks that operate on raster files.

    Features:
    - Auto-chunking with buffers: each block window is read with
      `buffer` extra cells on every side, processed, then cropped.
    - Rasters without a nodata value get the default (-9999).
    - Set the stage to either 'post' or 'file'
    """

    stage = "post"
    category = "raster-op"
    default_suffix = "_processed"

    def __init__(self, output=None, suffix=None, buffer=0, **kwargs):
        super().__init__(**kwargs)
        self.output = output
        self.suffix = suffix or self.default_suffix
        self.buffer = int(buffer)

    def run(self, entries):
        new_entries = []
        for mod, entry in entries:
            src_fn = entry.get("dst_fn")

            if not src_fn or not os.path.exists(src_fn) or not src_fn.lower().endswith(".tif"):
                new_entries.append((mod, entry))
                continue

            if self.output:
                dst_fn = self.output
            else:
                base, ext = os.path.splitext(src_fn)
                dst_fn = f"{base}{self.suffix}{ext}"

            logger.info(f"Running {self.name} on {os.path.basename(src_fn)}")

            try:
                success = self.process_raster(src_fn, dst_fn, entry)
                if success:
                    entry["src_fn"] = src_fn
                    entry["dst_fn"] = dst_fn
                    entry.setdefault("artifacts", {})[self.name] = dst_fn
            except Exception as e:
                logger.error(f"RasterHook {self.name} failed on {src_fn}: {e}")

            new_entries.append((mod, entry))

        return new_entries

    def process_raster(self, src_path, dst_path, entry):
        try:
            src = rasterio.open(src_path)
        except (RasterioError, OSError) as e:
            raise GridReadError(f"Unable to read raster {src_path}: {e}") from e

        with src:
            profile = src.profile.copy()
            ndv = float_or(src.nodata, DEFAULT_NODATA)
            profile.update(count=1, nodata=ndv)

            try:
                dst = rasterio.open(dst_path, 'w', **profile)
            except (RasterioError, OSError) as e:
                raise GridWriteError(f"Unable to write raster {dst_path}: {e}") from e

            try:
                with dst:
                    self._process_windows(src, dst, ndv, profile['dtype'], entry)
            except GridError:
                if os.path.exists(dst_path):
                    os.remove(dst_path)
                raise

        return True

    def _process_windows(self, src, dst, ndv, dtype, entry):
        for window, buff_win in self.yield_buffered_windows(src, buffer_size=self.buffer):
            try:
                data = src.read(1, window=buff_win)
            except (RasterioError, OSError) as e:
                raise GridReadError(f"Unable to read {src.name} at {buff_win}: {e}") from e

            chunk_transform = rasterio.windows.transform(buff_win, src.transform)

            result = self.process_chunk(
                data, ndv, entry,
                transform=chunk_transform,
                window=buff_win,
            )

            # Crop buffer
            y_off = window.row_off - buff_win.row_off
            x_off = window.col_off - buff_win.col_off

            final_chunk = result[y_off : y_off + window.height,
                                 x_off : x_off + window.width]

            try:
                dst.write(final_chunk.astype(dtype), 1, window=window)
            except (RasterioError, OSError) as e:
                raise GridWriteError(f"Unable to write {dst.name} at {window}: {e}") from e

        self.finalize(dst, entry)

    def process_chunk(self, data, ndv, entry, transform=None, window=None):
        """Must be implemented by subclasses. Returns processed numpy array."""

        raise NotImplementedError

    def finalize(self, dst, entry):
        """Called with the open output dataset once every window is written."""

        pass

    def yield_buffered_windows(self, src, buffer_size=0):
        for block_index, window in src.block_windows(1):
            if buffer_size == 0:
                yield window, window
                continue

            row_start = max(0, window.row_off - buffer_size)
            col_start = max(0, window.col_off - buffer_size)
            row_stop = min(src.height, window.row_off + window.height + buffer_size)
            col_stop = min(src.width, window.col_off + window.width + buffer_size)

            buffered_window = Window.from_slices((row_start, row_stop), (col_start, col_stop))
            yield window, buffered_window

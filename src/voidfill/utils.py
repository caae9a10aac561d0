#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
voidfill.utils
~~~~~~~~~~~~~~

Some utility functions for voidfill: filter-size coercion and
row-granular progress reporting.

:copyright: (c) 2010-2026 Regents of the University of Colorado
:license: MIT, see LICENSE for more details.
"""

import logging

from fetchez.utils import float_or
from tqdm import tqdm

logger = logging.getLogger(__name__)


def odd_filter_size(filter_size):
    """Return `filter_size` as an odd integer, bumping even values by one.

    The filter dimensions must be odd such that there is a middle cell.
    """

    size = float_or(filter_size)
    if size is None or size < 1 or not float(size).is_integer():
        raise ValueError(f"Filter size must be a positive integer, got {filter_size!r}")

    size = int(size)

    if size % 2 == 0:
        size += 1

    return size


class RowProgress:
    """Turn a row sweep into `callback(desc, percent)` calls.

    The callback only fires when the integer percentage changes, so a
    large grid reports at most ~101 times per pass.
    """

    def __init__(self, rows, desc, callback=None):
        self.rows = int(rows)
        self.desc = desc
        self.callback = callback
        self._last = None

    def update(self, row):
        if self.callback is None:
            return

        if self.rows > 1:
            percent = int(100.0 * row / (self.rows - 1))
        else:
            percent = 100

        if percent != self._last:
            self.callback(self.desc, percent)
            self._last = percent


class TqdmProgress:
    """A progress observer that renders each pass as a tqdm bar."""

    def __init__(self, leave=True):
        self.leave = leave
        self._desc = None
        self._pbar = None

    def __call__(self, desc, percent):
        if desc != self._desc:
            self.close()
            self._pbar = tqdm(total=100, desc=desc, leave=self.leave, unit='%')
            self._desc = desc

        self._pbar.update(max(0, percent - self._pbar.n))

    def close(self):
        if self._pbar is not None:
            self._pbar.close()
            self._pbar = None
            self._desc = None

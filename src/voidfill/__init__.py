#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
voidfill
~~~~~~~~~~~~~

Fill nodata holes in gridded surfaces using inverse-distance
weighting of the hole edges.

:copyright: (c) 2010-2026 Regents of the University of Colorado
:license: MIT, see LICENSE for more details.
"""

import os
import inspect
import importlib
import logging

from fetchez.hooks.registry import HookRegistry
from fetchez.hooks import FetchHook

from .grid import Grid, GridError, GridReadError, GridWriteError
from .spatial import FixedRadiusSearch
from .fill_missing import fill_missing_data

logger = logging.getLogger(__name__)
__version__ = "0.1.0"

def _auto_register_hooks():
    """Recursively scan the 'processors' directory and auto-register all FetchHooks."""
    current_dir = os.path.dirname(os.path.abspath(__file__))
    processors_dir = os.path.join(current_dir, "processors")

    if not os.path.exists(processors_dir):
        return

    for root, dirs, files in os.walk(processors_dir):
        dirs[:] = [d for d in dirs if not d.startswith('_')]

        for f in files:
            if f.endswith(".py") and not f.startswith("_"):
                rel_dir = os.path.relpath(root, current_dir)
                mod_path = rel_dir.replace(os.sep, '.')
                mod_name = f[:-3]

                full_mod_name = f"voidfill.{mod_path}.{mod_name}"

                try:
                    mod = importlib.import_module(full_mod_name)
                    for name, obj in inspect.getmembers(mod):
                        # Only concrete hooks defined in this module
                        if (inspect.isclass(obj) and
                            issubclass(obj, FetchHook) and
                            obj.__module__ == full_mod_name and
                            'name' in vars(obj)):
                            HookRegistry.register_hook(obj)
                except Exception as e:
                    logger.warning(f"Failed to auto-load voidfill hook {full_mod_name}: {e}")


def setup_fetchez():
    """Register all voidfill hooks with Fetchez."""

    _auto_register_hooks()

setup_fetchez()

#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
The voidfill Command Line Interface.
Fill the nodata holes of a raster with idw of the hole edges.
"""

import os
import sys
import argparse
import logging

from voidfill import __version__
from voidfill.grid import GridError

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger("voidfill")


def resolve_path(fn, working_directory=None):
    """Prepend the working directory to bare file names."""

    if working_directory and os.sep not in fn:
        return os.path.join(working_directory, fn)
    return fn


def run_hook(hook_instance, src, dst):
    """Helper to execute a hook in standalone mode."""

    entry = {
        'src_fn': src,
        'dst_fn': dst,
    }

    logger.info(f"Running {hook_instance.name}...")
    try:
        if os.path.exists(dst):
            logger.warning(f"Overwriting {dst}")

        success = hook_instance.process_raster(src, dst, entry)

        if success:
            logger.info(f"Success: {dst}")
        else:
            logger.error("Operation failed (hook returned False)")
            sys.exit(1)

    except (GridError, ValueError) as e:
        logger.error(f"Error: {e}")
        sys.exit(1)


def run_fill(src, dst, filter_size, keep_holes, verbose):
    """Fill the whole raster in memory."""

    from voidfill.api import fill_raster

    logger.info("Running fill_missing_data...")
    try:
        if os.path.exists(dst):
            logger.warning(f"Overwriting {dst}")

        fill_raster(src, dst, filter_size=filter_size, keep_holes=keep_holes, verbose=verbose)
        logger.info(f"Success: {dst}")

    except (GridError, ValueError) as e:
        logger.error(f"Error: {e}")
        sys.exit(1)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="voidfill",
        description="Fill nodata holes in a raster using inverse-distance weighting of the hole edges.",
        epilog="Example: voidfill --wd /path/to/data -i input.tif -o filled.tif --filter 25",
    )
    parser.add_argument("-i", "--input", required=True, help="Input Raster")
    parser.add_argument("-o", "--output", required=True, help="Output Raster")
    parser.add_argument("--wd", help="Working directory; file names without a path are taken relative to it")
    parser.add_argument("--filter", type=int, default=11, help="Size of the filter kernel (default is 11); forced odd")
    parser.add_argument("--zero-holes", action="store_true",
                        help="Write 0.0 into holes with no edge cells in range instead of leaving nodata")
    parser.add_argument("--chunked", action="store_true",
                        help="Process the raster block by block instead of in memory")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args(argv)

    src = resolve_path(args.input, args.wd)
    dst = resolve_path(args.output, args.wd)
    keep_holes = not args.zero_holes

    if args.chunked:
        from voidfill.processors.rasters.fill import FillMissingData
        from voidfill.utils import TqdmProgress

        try:
            hook = FillMissingData(
                filter_size=args.filter,
                keep_holes=keep_holes,
                progress=TqdmProgress(leave=False) if args.verbose else None,
            )
        except ValueError as e:
            logger.error(f"Error: {e}")
            sys.exit(1)

        run_hook(hook, src, dst)
    else:
        run_fill(src, dst, args.filter, keep_holes, args.verbose)

if __name__ == "__main__":
    main()

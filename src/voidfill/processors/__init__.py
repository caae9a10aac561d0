#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
voidfill.processors
~~~~~~~~~~~~~~~~~~~

Fetchez hooks live here; they are registered by `voidfill.setup_fetchez`.

:copyright: (c) 2010-2026 Regents of the University of Colorado
:license: MIT, see LICENSE for more details.
"""

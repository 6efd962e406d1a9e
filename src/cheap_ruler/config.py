# -*- coding: utf-8 -*-

"""
cheap_ruler/config.py

This module centralizes the constants used to build a ruler. Keeping the unit table and
the series coefficients in one place keeps construction, the vectorized helpers and the
tests consistent with each other.

Contents:
---------
1. UNIT_FACTORS:
   - Multiplier for each supported unit, relative to kilometers.
   - Names are matched exactly (case-sensitive). Adding a unit here makes it valid for
     `cheap_ruler.create` everywhere.

2. KX_COEFFICIENTS / KY_COEFFICIENTS:
   - FCC ellipsoidal approximation (http://1.usa.gov/1Wb1bv7) for kilometers per degree
     of longitude and latitude, expressed as multiples of cos(n * lat).
   - These are empirical literals and must not be rounded or recomputed.

3. DEFAULT_UNITS:
   - Unit used when the caller passes no unit (None or an empty string).

Usage:
------
    from cheap_ruler.config import UNIT_FACTORS

    UNIT_FACTORS["miles"]   # 0.621371192...

"""

# ───────────────────────────────────────────────────────────────────────────────
# 1) UNIT MULTIPLIERS (relative to kilometers)
# ───────────────────────────────────────────────────────────────────────────────
UNIT_FACTORS = {
    'kilometers': 1.0,
    'miles': 1000 / 1609.344,           # international mile
    'nauticalmiles': 1000 / 1852,
    'meters': 1000.0,
    'metres': 1000.0,
    'yards': 1000 / 0.9144,
    'feet': 1000 / 0.3048,
    'inches': 1000 / 0.0254,
}

# ───────────────────────────────────────────────────────────────────────────────
# 2) FCC SERIES COEFFICIENTS (km per degree)
# ───────────────────────────────────────────────────────────────────────────────
# kx = 111.41513 cos(lat) - 0.09455 cos(3 lat) + 0.00012 cos(5 lat)
KX_COEFFICIENTS = {
    'cos1': 111.41513,
    'cos3': -0.09455,
    'cos5': 0.00012,
}

# ky = 111.13209 - 0.56605 cos(2 lat) + 0.0012 cos(4 lat)
KY_COEFFICIENTS = {
    'cos0': 111.13209,
    'cos2': -0.56605,
    'cos4': 0.0012,
}

# ───────────────────────────────────────────────────────────────────────────────
# 3) DEFAULTS
# ───────────────────────────────────────────────────────────────────────────────
DEFAULT_UNITS = 'kilometers'

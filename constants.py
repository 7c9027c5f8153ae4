"""
Global constants used throughout the project
"""

import math

INF = math.inf

# Grid cells holding this value are walls
OBSTACLE = 1

# 4-neighbourhood as (d_row, d_col): right, down, left, up
GRID_DIRECTIONS = (
    (0, 1),
    (1, 0),
    (0, -1),
    (-1, 0),
)

# Consistency tolerance for weighted Union-Find potentials
WEIGHT_TOLERANCE = 1e-9

# Seconds; entries never expire by default
DEFAULT_TTL = math.inf

# Marker in Floyd-Warshall next-hop matrices when no path exists
NO_NEXT = -1

DEBUG = False

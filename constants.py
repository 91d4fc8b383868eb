"""
Global constants used throughout the project
"""

# Sample graph shown by main.py: (source, destination, weight)
SAMPLE_NUM_VERTICES = 6
SAMPLE_EDGES = (
    (0, 1, 4),
    (0, 2, 3),
    (1, 2, 5),
    (1, 3, 2),
    (2, 3, 7),
    (2, 4, 8),
    (3, 4, 6),
    (3, 5, 1),
    (4, 5, 9),
)

LOG_FORMAT = "%(levelname)s | %(message)s"
DEBUG = False

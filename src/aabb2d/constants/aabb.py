import numpy as np

# Empty box: bounds inverted so that any point added sets them directly
EMPTY_MIN = np.inf  # min_x, min_y
EMPTY_MAX = -np.inf  # max_x, max_y

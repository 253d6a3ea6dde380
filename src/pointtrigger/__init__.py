"""Click points on a 2D surface, rescale them to a logical frame and export them as CSV."""

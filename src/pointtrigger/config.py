"""
Configuration & Global Constants
================================
This module serves as the central registry for the application's constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (surface size, marker style, file
   names) from being scattered throughout the code.
2. Consistency: The model, the controller and the widgets all read the same
   defaults, so e.g. the Y-flip and the drawing surface agree on the height.

Exports:
    SURFACE_WIDTH (int), SURFACE_HEIGHT (int): Default drawing surface size in pixels.
    MARKER_RADIUS (int): Radius of the painted markers in pixels.
    DEFAULT_EXPORT_NAME (str): Filename used when the filename field is blank.
"""

# Drawing surface
SURFACE_WIDTH: int = 500
SURFACE_HEIGHT: int = 500

MARKER_RADIUS: int = 2
MARKER_FILL_COLOR: str = "#0D6EFD"
MARKER_EDGE_COLOR: str = "k"
SURFACE_BACKGROUND: str = "w"

# Export
DEFAULT_EXPORT_NAME: str = "points"
EXPORT_EXTENSION: str = ".csv"
CSV_HEADER: tuple[str, str] = ("x", "y")

# Settings keys (QSettings)
SETTINGS_LAST_EXPORT_DIR: str = "export/last_dir"

# UI texts
VISIBLE_APP_NAME: str = "Point Trigger"
COUNTER_TEMPLATE: str = "Number of instances: {count}"

"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt) or the drawing surface (pyqtgraph).
It deals with points, the logical frame and CSV export.
"""

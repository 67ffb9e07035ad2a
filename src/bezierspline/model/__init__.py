"""
The MODEL layer contains pure data structures and geometry.
It has NO knowledge of the GUI (Qt).
It deals with Knots, Handles and Bézier math.
"""

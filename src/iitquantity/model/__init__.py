"""
The MODEL layer contains pure data structures and the display-tree renderer.
It has NO knowledge of the GUI (Qt).
It deals with the screen content, its style tokens and its composition.
"""

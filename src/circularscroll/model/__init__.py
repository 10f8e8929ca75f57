"""
The MODEL layer contains pure data structures and geometry.
It has NO knowledge of input handling or of how boxes are rendered.
"""

"""
The CONTROLLER layer turns input into box commands.
It depends on the geometry provider interface only, never on a rendering engine.
"""

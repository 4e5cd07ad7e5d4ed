"""
The MODEL layer contains pure data structures and the summation engine.
It has NO knowledge of the GUI (Qt) or the plotting widgets.
"""

"""
The MODEL layer contains pure conversion and formatting logic.
It has NO knowledge of the GUI (Qt).
"""

"""
Controllers mediate between the host-owned value and the picker widgets.

Note: Controllers use Qt signals but never create widgets.
"""

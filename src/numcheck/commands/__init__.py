"""
Commands Package

Click command implementations grouped by area.
"""

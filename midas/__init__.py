"""
midas package marker.
"""

"""
midas/api package marker.
"""

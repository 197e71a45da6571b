"""
strkit Runtime Package.
"""

"""
Default configuration values
"""

# Sizing hints accepted by HashUnionFindSet, kept for parity with hash-map
# based implementations. Python dictionaries grow on their own.
DEFAULT_SIZE_HINT = 16
DEFAULT_LOAD_FACTOR = 0.75

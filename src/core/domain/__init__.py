"""Domain models and the static lookup tables.

The domain knows nothing about the CLI or about libc: only names, numbers
and descriptions.
"""

"""
Shared Kernel

Error taxonomy, persistence boundary and API glue shared by every app.
"""

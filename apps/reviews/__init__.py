"""Reviews app package.

Guest reviews keyed by a raw place identifier. Reviews are open: anyone
may post one and anyone who knows a review id may delete it.
"""

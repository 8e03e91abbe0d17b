"""Domain primitives shared across apps."""

"""HTTP API glue shared by all apps."""

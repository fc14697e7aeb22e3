"""
Shared Kernel

Building blocks shared across all ParkBoard apps: domain errors, value
objects, authorization policies and the HTTP/database glue that renders and
enforces them.
"""

"""
Dataset layer.

Responsibilities:
- Load the restaurant JSON file once at startup.
- Hold the records as an immutable, ordered snapshot.
- Read the known optional fields of a record without trusting its shape.
"""

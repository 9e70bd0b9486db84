"""
Query layer.

Responsibilities:
- Paginate the dataset and filter it by name or cuisine substring.
- Rank restaurants by great-circle distance from a point.
- Turn raw query-string values into typed engine inputs.
- Signal bad requests and missing data as typed errors.
"""

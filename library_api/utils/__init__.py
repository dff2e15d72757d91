"""
Utilities Package

Helper functions used across the application:
- pagination.py: page/limit normalization and response metadata
- validators.py: UUID and ISBN shape checks
"""

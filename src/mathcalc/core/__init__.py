"""
Core calculation primitives, domain models, and contracts.

This module contains the building blocks that are independent of the
calling application: parsing, arithmetic, errors, and payload schemas.
"""

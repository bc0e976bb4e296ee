"""
Revenue Leak Calculator Backend Package.

FastAPI service layer for the revenue leak calculator: turns company metrics
into leakage estimates, a lead score, validation warnings and the submission
record that drives follow-up marketing automation.

Subpackages:
    - api: FastAPI route handlers
    - core: Configuration and dependencies
    - models: Pydantic schemas and enums
    - services: Calculation engine services
"""

__version__ = "1.0.0"

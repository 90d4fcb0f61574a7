"""
Business services for FuelBhai.

- verification.py: render and deliver verification-code emails
"""

__all__: list[str] = []

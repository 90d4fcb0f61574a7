"""
Core logic package for FuelBhai.

Email rendering and delivery, the foreground trip-session controller, and
their configuration live here. Lambda handlers in src/handlers/ are thin
wrappers that call into core/.
"""

__all__: list[str] = []

"""
Version 1 of the API.

The browser client calls these routes without a version segment, so
the v1 router is mounted at the application root (or under
``API_PREFIX`` when that is set).
"""

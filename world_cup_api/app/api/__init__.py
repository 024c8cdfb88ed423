"""
API package containing the HTTP routes.

``router.py`` aggregates the endpoint routers defined in
``endpoints`` into a single router that the application includes.
"""

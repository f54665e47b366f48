"""
API package containing the HTTP routes.

``router`` aggregates the domain routers; ``endpoints`` holds one module
per resource.
"""

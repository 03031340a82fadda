"""
API package containing versioned routes.

``errors`` holds the translation from service exceptions to HTTP
responses; ``v1`` exposes the routes themselves.
"""

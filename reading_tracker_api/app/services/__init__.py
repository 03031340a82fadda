"""
Service layer abstraction.

Each service encapsulates business logic for a domain and talks to
the in‑memory store.  Services raise the exceptions defined in
``exceptions``; translating them to HTTP responses is left to the API
layer.
"""

"""
FastAPI routers grouped by collection (users, resources, bookings) plus the
login and session-scoped endpoints.

Each module exposes an APIRouter included by ``campus.app.create_app``.
Services are looked up on ``app.state`` so tests can build an app around a
temporary store.
"""

"""
Business services for Voyago.

- trips.py, expenses.py, notifications.py: row-level reads and writes
- sharing.py: invitation notifications and the accept/decline handshake
- balances.py: per-viewer expense totals
- carousel.py: trip card index tracking
- itinerary.py: marker colors and stop lists
- places.py: Google Maps nearby search and geocoding
- directory.py: user directory listing
- migration.py: Alembic upgrades
"""

__all__: list[str] = []

"""In-memory URL shortener: random shortcodes, collision-safe store, FastAPI front end."""

__version__ = '0.1.0'

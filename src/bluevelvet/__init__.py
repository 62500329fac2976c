"""Blue Velvet Music Store backend.

Catalog (hierarchical product categories) and user accounts behind a
FastAPI REST API.
"""

__version__ = "1.0.0"

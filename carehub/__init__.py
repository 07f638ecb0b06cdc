"""Hospital records: users, clinics, drugs, prescriptions, ambulances and a location map, on small self-contained data structures."""

__version__ = "0.1.0"
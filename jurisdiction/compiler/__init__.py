"""Data compiler: validates the raw source and generates ``jurisdiction.generated``."""

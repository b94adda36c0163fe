"""Schema loading and validation for box net catalogs."""

"""Shape services, calibration and measurement operations."""

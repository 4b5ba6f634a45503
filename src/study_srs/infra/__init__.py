"""Infrastructure adapters for study_srs."""

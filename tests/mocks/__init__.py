"""Test doubles for study_srs."""

"""Test helpers for loading comment fixtures and building postings."""

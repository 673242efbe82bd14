"""Readers producing text from files on disk."""

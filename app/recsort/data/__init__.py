"""Bundled data files for recsort."""

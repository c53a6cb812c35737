"""Organize media files into ``YYYY_MM_DD`` folders using dates found in their names."""

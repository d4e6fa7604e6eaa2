"""Adapters feeding rendered pages into :mod:`pagediff.core`."""

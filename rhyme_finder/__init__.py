"""Rhyme and synonym lookups backed by the Datamuse word service."""

__version__ = "0.1.0"

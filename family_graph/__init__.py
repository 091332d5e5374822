"""
Family Graph - Turn extracted family entities into a positioned family graph.

This package takes the persons and relationships an extraction service found in
free text, deduplicates them into members, assigns generations and produces
coordinates and typed connections for a family tree view.
"""

__version__ = "0.1.0"
__author__ = "Family Graph Contributors"

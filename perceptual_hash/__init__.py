"""Perceptual hashing of images, with Hamming distance between hashes."""

__version__ = "3.2.0"
"""
Mainland Boundary Classifier

This package provides tools for classifying country boundary segments
as mainland or island/exclave by testing their points against a
reference landmass geometry, and for exporting and plotting the
mainland subset.
"""

__version__ = "0.1.0"

"""
Proposal App - Employment Contract Proposal Generator

Renders a fixed set of structured employment-contract terms (entry bonus,
payment schedule, contractual conditions and grievance notes) into a
human-readable Italian proposal document.
"""

__version__ = "0.1.0"
__author__ = "Proposal App Team"

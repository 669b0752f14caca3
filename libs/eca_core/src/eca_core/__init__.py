"""
eca_core - shared enums and pure data models for the ECA services.
"""

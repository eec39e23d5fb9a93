"""Kernel – error hierarchy and security ports shared by every layer."""

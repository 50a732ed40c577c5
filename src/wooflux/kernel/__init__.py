"""Kernel – error hierarchy and result types shared by every layer."""

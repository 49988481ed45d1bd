"""Checks for Terraform Provider documentation."""

__version__ = "0.11.1"
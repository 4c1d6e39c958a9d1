"""Appliance energy usage and savings analysis."""

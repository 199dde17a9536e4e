"""OTMS overtime package.

Organized by feature modules (overtime, reports, export, holidays) with a thin
Flask controller layer on top of pure calculation and service layers.
"""

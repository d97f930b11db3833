"""
Feature modules for Marathon Tracker.

Each feature is a self-contained module with:
- models.py - dataclasses for the domain
- service.py - Business logic (optional)
- loader.py / sources.py - Data access
"""

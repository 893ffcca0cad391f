"""Agenda — recurring calendar events and day-level agenda queries."""

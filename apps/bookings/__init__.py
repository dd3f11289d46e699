"""Bookings app package.

This app books people into seats by name. Every booking call runs as a
single database transaction, so either all names of the call are stored
or none of them are.
"""

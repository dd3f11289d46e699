"""
Shared Kernel

This module contains the database plumbing shared by every app: the SQL
gateway over Django's connections and the unit of work built on
``transaction.atomic``.
"""

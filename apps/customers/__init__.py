"""Customers app package.

Bootstraps the customers table, bulk loads customers from whole names and
looks them up by first name through plain SQL.
"""

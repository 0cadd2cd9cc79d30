"""Laundry System package.

This package is organized by feature modules (users, catalog, transactions,
notifications, ...) with a thin Flask controller layer on top of service and
repository layers. The business core never talks to MySQL directly; it goes
through the persistence gateway injected by the container.
"""

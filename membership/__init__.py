"""Membership platform — www site, admin back-office and REST API."""

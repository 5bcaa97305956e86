"""Reservia marketplace API."""

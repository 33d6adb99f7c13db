"""Guests app package: guest profiles referenced by bookings."""

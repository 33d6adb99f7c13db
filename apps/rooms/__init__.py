"""Rooms app package.

Companies (tenants), room categories and physical rooms. Rooms are
read-only from the booking workflow's point of view: bookings test
them for conflicts and lock their rows to serialize intake.
"""

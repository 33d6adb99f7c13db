"""Bookings app package.

This app encapsulates the booking domain: the booking model, the
status lifecycle, conflict detection and the queued booking workflow
(intake and confirmation). Overlapping reservations are prevented by
locking the room row inside a database transaction before bookings
are read, backed by a check constraint on the stay dates.
"""

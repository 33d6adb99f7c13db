"""Finances app package.

Records payments against bookings. Payments are validated (positive
amount, supported currency, existing and non-cancelled booking) by the
payment command handler before they are stored.
"""

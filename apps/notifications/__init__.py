"""Notifications app package.

Formats guest-facing messages for booking events and delivers them by
email (Django mail backend) and SMS (Twilio). Confirmation messages are
sent from a Celery task queued when a booking is confirmed.
"""

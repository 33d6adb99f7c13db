import os

from celery import Celery
from celery.schedules import crontab  # type: ignore

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.dev")

app = Celery("stayos")

app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks()


# ============================================================================
# CELERY BEAT SCHEDULE (Periodic Tasks)
# ============================================================================

app.conf.beat_schedule = {
    # Checkout reminders for guests leaving tomorrow - daily at 18:00
    "send-checkout-reminders": {
        "task": "bookings.send_checkout_reminders",
        "schedule": crontab(hour=18, minute=0),
    },
}

import atexit
from datetime import timedelta

from apscheduler.triggers.interval import IntervalTrigger
from flask import current_app

from screenpay.extensions import store, notifier, scheduler
from screenpay.models.withdrawal import AUTO_COMPLETED
from screenpay.services.notification_service import withdraw_auto_completed_text
from screenpay.utils.timestamps import parse_iso, utc_now

SWEEP_JOB_ID = "sweep_stale_withdrawals"


def sweep_stale_withdrawals(now=None):
    """Mark pending withdrawals older than STALE_AFTER_HOURS as auto_completed.

    No money moves; the new status only flags the request for a manual payout.
    Returns the (username, withdrawal) pairs that changed.
    """
    now = now or utc_now()
    max_age = timedelta(hours=current_app.config["STALE_AFTER_HOURS"])
    changed = []

    with store.transaction() as document:
        for username, user in document.users.items():
            for w in user.withdraws:
                if not w.is_pending:
                    continue
                requested_at = parse_iso(w.requested_at)
                if requested_at is None or now - requested_at < max_age:
                    continue
                w.mark(AUTO_COMPLETED, now=now)
                changed.append((username, w))

        if changed:
            store.save(document)

    for username, w in changed:
        notifier.dispatch_message(withdraw_auto_completed_text(username, w))

    if changed:
        current_app.logger.info("Sweeper marked %d withdrawal(s) auto_completed", len(changed))
    return changed


def run_sweep(app):
    """Scheduled entry point; one failed run never stops the next."""
    with app.app_context():
        try:
            sweep_stale_withdrawals()
        except Exception:
            app.logger.exception("Withdrawal sweeper run failed")


def start_sweeper(app):
    if scheduler.get_job(SWEEP_JOB_ID):
        scheduler.remove_job(SWEEP_JOB_ID)

    scheduler.add_job(
        run_sweep,
        trigger=IntervalTrigger(hours=app.config["SWEEP_INTERVAL_HOURS"]),
        args=[app],
        id=SWEEP_JOB_ID,
        max_instances=1,
        coalesce=True,
    )
    if not scheduler.running:
        scheduler.start()
        atexit.register(stop_sweeper)

    app.logger.info("Background worker started - checks every %s hour(s)", app.config["SWEEP_INTERVAL_HOURS"])


def stop_sweeper():
    if scheduler.running:
        scheduler.shutdown(wait=False)
    notifier.shutdown()

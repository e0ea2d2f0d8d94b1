import click

from screenpay.extensions import store
from screenpay.services.sweeper_service import sweep_stale_withdrawals


def register_commands(app):

    @app.cli.command("init-db")
    def init_db():
        """Create the JSON document file if it does not exist."""
        if store.ensure_exists():
            click.echo(f"Created {store.path}")
        else:
            click.echo(f"{store.path} already exists")

    @app.cli.command("sweep-withdrawals")
    def sweep_withdrawals():
        """Run one staleness sweep now."""
        changed = sweep_stale_withdrawals()
        for username, w in changed:
            click.echo(f"{username:<20} {w.id} -> {w.status}")
        click.echo(f"{len(changed)} withdrawal(s) marked auto_completed")

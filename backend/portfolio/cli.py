import click
from flask import current_app
from flask.cli import with_appcontext
from sqlalchemy.exc import IntegrityError

from .application.settings import seed_settings
from .extensions import db
from .gateway import SqlGateway
from .models.user import User
from .gateway.auth import MIN_PASSWORD_LENGTH


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create all tables and seed the default site settings."""
    db.create_all()
    created = seed_settings(gateway=SqlGateway())
    click.echo("Database initialized" + (" with default settings." if created else "."))


@click.command("create-user")
@click.argument("email")
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
@click.option("--role", default="owner", show_default=True)
@with_appcontext
def create_user_command(email, password, role):
    """Create a dashboard account."""
    if len(password) < MIN_PASSWORD_LENGTH:
        raise click.BadParameter(
            f"Password should be at least {MIN_PASSWORD_LENGTH} characters",
            param_hint="--password",
        )

    user = User()
    user.email = email.strip().lower()
    user.role = role
    user.set_password(password)

    try:
        db.session.add(user)
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise click.ClickException(f"User {user.email} already exists")

    current_app.logger.info("Created user %s", user.id)
    click.echo(f"Created user {user.email}")


def register_commands(app):
    app.cli.add_command(init_db_command)
    app.cli.add_command(create_user_command)

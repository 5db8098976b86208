"""Seed database with sample users for development.

Run with either:
    flask --app todolist_core.main seed
    python -m todolist_core.db.seed
"""

import logging
import sqlite3

import click
from flask import current_app
from flask.cli import with_appcontext

from . import get_core, init_db
from ..auth import service
from ..auth.schemas import UserCreate

logger = logging.getLogger(__name__)

SEED_PASSWORD_ROUNDS = 10

SAMPLE_USERS = [
    {
        "name": "John Smith",
        "username": "john",
        "email": "john@example.com",
        "password": "password123",
    },
    {
        "name": "Jane Doe",
        "username": "jane",
        "email": "jane@example.com",
        "password": "password456",
    },
]


def seed_users(database_path: str, rounds: int = SEED_PASSWORD_ROUNDS) -> list[str]:
    """
    Insert the sample users in one transaction.

    Returns:
        Usernames that were created

    Raises:
        sqlite3.IntegrityError: If any sample user already exists (nothing is inserted)
    """
    init_db(database_path)

    created = []
    with get_core(atomic=True, database_path=database_path) as core:
        for user in SAMPLE_USERS:
            service.create_user(core, UserCreate(**user), rounds=rounds)
            created.append(user["username"])

    return created


@click.command("seed")
@with_appcontext
def seed_command():
    """Create the sample users (john, jane)."""
    try:
        created = seed_users(
            current_app.config["DATABASE_PATH"],
            rounds=current_app.config["BCRYPT_WORK_FACTOR"],
        )
    except sqlite3.IntegrityError:
        raise click.ClickException("Sample users already exist")

    click.echo("Database seeded successfully.")
    for user in SAMPLE_USERS:
        click.echo(f"  {user['username']:<6} {user['email']:<20} {user['password']}")
    logger.info(f"Seeded users: {', '.join(created)}")


if __name__ == "__main__":
    from ..config import load_settings

    settings = load_settings()
    logging.basicConfig(level=settings.log_level)
    try:
        names = seed_users(settings.database_path)
    except sqlite3.IntegrityError:
        raise SystemExit("Sample users already exist")
    print(f"Seeded users: {', '.join(names)}")

import click
from flask import current_app
from habitare.extensions import db
from habitare.seeds import load_seed_content


def register_commands(app):
    @app.cli.command("init-db")
    @click.option("--seed", is_flag=True, help="Load the demo articles after creating tables.")
    @click.option("--drop", is_flag=True, help="Drop every table first.")
    def init_db(seed, drop):
        """Create the magazine tables (articles, sections, images, pins)."""
        if drop:
            db.drop_all()
        db.create_all()
        click.echo(f"Database ready at {current_app.config['SQLALCHEMY_DATABASE_URI']}")

        if seed:
            created = load_seed_content()
            click.echo(f"Seeded {created} articles")

import json
import click
from drishti.models import AdminAccounts, SettingsStore, GALLERY, PRICING, SLIDES, SOCIAL_LINKS
from drishti.utils.supabase_client import UpstreamError, get_rest_client

# ===========================
# Default site content
# ===========================

DEFAULT_CONTENT = {
    SLIDES: [
        {'image_url': 'https://images.unsplash.com/photo-1497633762265-9d179a990aa6?auto=format&fit=crop&w=1350&q=80',
         'title': 'शान्त वातावरण, बेहतर पढ़ाई', 'subtitle': 'Drishti Digital Library में आपका स्वागत है',
         'order_num': 1, 'is_active': True},
        {'image_url': 'https://images.unsplash.com/photo-1521587760476-6c12a4b040da?auto=format&fit=crop&w=1350&q=80',
         'title': 'Focus on Your Success', 'subtitle': 'आधुनिक सुविधाओं के साथ अपनी मंज़िल को पाएं',
         'order_num': 2, 'is_active': True},
    ],
    PRICING: [
        {'name': 'Single Shift', 'price': 500, 'duration': '/month', 'order_num': 1,
         'features': ['4 Hours Daily', 'AC Room', 'WiFi Access', 'Fixed Seat'],
         'is_popular': False, 'is_full': False},
        {'name': 'Double Shift', 'price': 900, 'duration': '/month', 'order_num': 2,
         'features': ['8 Hours Daily', 'AC Room', 'WiFi Access', 'Fixed Seat', 'Locker Facility'],
         'is_popular': True, 'is_full': False},
        {'name': 'Full Day', 'price': 1500, 'duration': '/month', 'order_num': 3,
         'features': ['16 Hours Daily', 'AC Room', 'WiFi Access', 'Fixed Seat', 'Locker Facility', 'Free Newspapers'],
         'is_popular': False, 'is_full': True},
    ],
    GALLERY: [
        {'image_url': 'https://images.unsplash.com/photo-1491841573634-28140fc7ced7?auto=format&fit=crop&w=600&q=80', 'order_num': 1},
        {'image_url': 'https://images.unsplash.com/photo-1512820790803-83ca734da794?auto=format&fit=crop&w=600&q=80', 'order_num': 2},
        {'image_url': 'https://images.unsplash.com/photo-1524995997946-a1c2e315a42f?auto=format&fit=crop&w=600&q=80', 'order_num': 3},
        {'image_url': 'https://images.unsplash.com/photo-1568667256549-094345857637?auto=format&fit=crop&w=600&q=80', 'order_num': 4},
    ],
    SOCIAL_LINKS: [
        {'platform': 'whatsapp', 'url': 'https://wa.me/919876543210'},
        {'platform': 'instagram', 'url': '#'},
        {'platform': 'facebook', 'url': '#'},
        {'platform': 'youtube', 'url': '#'},
    ],
}


def register_commands(flask_app):
    """Attach the maintenance commands to ``flask``."""

    @flask_app.cli.command('create-admin')
    def create_admin():
        """Create the admin user from ADMIN_USERNAME / ADMIN_PASSWORD."""
        username = flask_app.config['ADMIN_USERNAME']
        password = flask_app.config['ADMIN_PASSWORD']
        if not password:
            raise click.ClickException("Set ADMIN_PASSWORD before creating the admin user.")

        accounts = AdminAccounts(get_rest_client())
        try:
            if accounts.find(username):
                click.echo(f"Admin user '{username}' already exists.")
                return
            accounts.create(username, password)
        except UpstreamError as e:
            raise click.ClickException(str(e))
        click.echo(f"Admin user '{username}' created successfully.")

    @flask_app.cli.command('seed-content')
    def seed_content():
        """Fill empty content tables with the default slides, plans, gallery and links."""
        client = get_rest_client()
        for resource, rows in DEFAULT_CONTENT.items():
            try:
                if client.request(f"{resource.table}?select=id&limit=1"):
                    click.echo(f"{resource.table}: already has data, skipped.")
                    continue
                client.request(resource.table, method='POST', body=resource.for_write(rows))
            except UpstreamError as e:
                raise click.ClickException(f"{resource.table}: {e}")
            click.echo(f"{resource.table}: inserted {len(rows)} rows.")

    @flask_app.cli.command('show-settings')
    def show_settings():
        """Print the current site settings as JSON."""
        try:
            settings = SettingsStore(get_rest_client()).all()
        except UpstreamError as e:
            raise click.ClickException(str(e))
        click.echo(json.dumps(settings, indent=2, ensure_ascii=False))

"""
Row-store resources.

The tables live in Supabase; this module only describes how each one is
addressed through the REST filter language and how rows are shaped on the
way in and out.
"""
from drishti.utils.helpers import encode_features, decode_features
from drishti.utils.supabase_client import filter_eq


class Resource:
    """One table exposed through the generic CRUD routes."""

    def __init__(self, name, table, order=None, fields=None,
                 prepare_write=None, prepare_read=None):
        self.name = name            # URL segment under /api/
        self.table = table
        self.order = order          # e.g. 'order_num.asc'
        self.fields = fields        # whitelist applied on create, None keeps all
        self._prepare_write = prepare_write
        self._prepare_read = prepare_read

    def __repr__(self):
        return f'<Resource {self.name} -> {self.table}>'

    def list_path(self):
        path = f"{self.table}?select=*"
        if self.order:
            path += f"&order={self.order}"
        return path

    def row_path(self, row_id):
        return f"{self.table}?{filter_eq('id', row_id)}"

    def for_create(self, data):
        if self.fields is not None and isinstance(data, dict):
            data = {field: data.get(field) for field in self.fields if field in data}
        return self.for_write(data)

    def for_write(self, data):
        if isinstance(data, list):
            return [self.for_write(item) for item in data]
        # Scalars go to the store untouched and are rejected there
        if self._prepare_write and isinstance(data, dict):
            return self._prepare_write(dict(data))
        return data

    def present(self, row):
        if self._prepare_read and isinstance(row, dict):
            return self._prepare_read(dict(row))
        return row

    def present_all(self, rows):
        return [self.present(row) for row in rows]


def _pricing_write(plan):
    if 'features' in plan:
        plan['features'] = encode_features(plan['features'])
    return plan


def _pricing_read(plan):
    plan['features'] = decode_features(plan.get('features'))
    return plan


def _contact_write(submission):
    if not submission.get('message'):
        submission['message'] = ''
    return submission


SLIDES = Resource('slides', 'hero_slides', order='order_num.asc')
GALLERY = Resource('gallery', 'gallery_images', order='order_num.asc')
SOCIAL_LINKS = Resource('social-links', 'social_links')
PRICING = Resource('pricing', 'pricing_plans', order='order_num.asc',
                   prepare_write=_pricing_write, prepare_read=_pricing_read)
CONTACT = Resource('contact', 'contact_submissions', order='created_at.desc',
                   fields=('name', 'phone', 'shift', 'message'),
                   prepare_write=_contact_write)

# Resources with the full list/create/update/delete surface
CRUD_RESOURCES = (SLIDES, GALLERY, SOCIAL_LINKS, PRICING)


class SettingsStore:
    """Key/value site settings kept one row per key in ``site_settings``."""

    table = 'site_settings'

    def __init__(self, client):
        self.client = client

    def all(self):
        rows = self.client.request(f"{self.table}?select=*")
        return {row['key']: row.get('value') for row in rows}

    def upsert(self, key, value):
        # Single atomic insert-or-merge on the unique ``key`` column
        return self.client.request(
            f"{self.table}?on_conflict=key",
            method='POST',
            body={'key': key, 'value': value},
            headers={'Prefer': 'resolution=merge-duplicates,return=representation'}
        )

    def update(self, values):
        for key, value in values.items():
            self.upsert(key, value)


class AdminAccounts:
    table = 'admin_users'

    def __init__(self, client):
        self.client = client

    def find(self, username):
        rows = self.client.request(f"{self.table}?{filter_eq('username', username)}&select=*")
        return rows[0] if rows else None

    def authenticate(self, username, password):
        """Return the admin row when the plaintext password matches."""
        if not username or password is None:
            return None
        admin = self.find(username)
        if admin is None or admin.get('password') != password:
            return None
        return admin

    def set_password(self, admin_id, new_password):
        self.client.request(
            f"{self.table}?{filter_eq('id', admin_id)}",
            method='PATCH',
            body={'password': new_password}
        )

    def create(self, username, password):
        rows = self.client.request(
            self.table,
            method='POST',
            body={'username': username, 'password': password}
        )
        return rows[0] if rows else None

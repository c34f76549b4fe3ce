"""
Thin client for the Supabase REST (PostgREST) interface.

Every API route talks to the row store through ``SupabaseRestClient.request``,
passing a resource path with its filter/order/select query string.
"""
from urllib.parse import quote

import requests
from flask import current_app


class UpstreamError(Exception):
    """Raised when the row store answers with a non-success status."""

    def __init__(self, status_code, text):
        self.status_code = status_code
        self.text = text
        super().__init__(f"Supabase error: {status_code} - {text}")


def filter_eq(column, value):
    """Build a ``column=eq.value`` filter with the value URL-quoted."""
    return f"{column}=eq.{quote(str(value), safe='')}"


class SupabaseRestClient:
    def __init__(self, base_url, api_key, timeout=10):
        if not base_url or not api_key:
            raise ValueError("Supabase credentials not configured")
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.timeout = timeout

    def _headers(self, overrides=None):
        headers = {
            'apikey': self.api_key,
            'Authorization': f'Bearer {self.api_key}',
            'Content-Type': 'application/json',
            'Prefer': 'return=representation',
        }
        if overrides:
            headers.update(overrides)
        return headers

    def request(self, path, method='GET', body=None, headers=None):
        """
        Call ``<base_url>/rest/v1/<path>`` and return the decoded JSON body.

        Args:
            path: Resource path including its query string,
                e.g. ``hero_slides?select=*&order=order_num.asc``
            method: HTTP verb
            body: JSON-serialisable payload for POST/PATCH
            headers: Header overrides merged over the defaults

        Raises:
            UpstreamError: on a non-2xx status or a transport failure
        """
        url = f"{self.base_url}/rest/v1/{path}"
        try:
            response = requests.request(
                method,
                url,
                headers=self._headers(headers),
                json=body,
                timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            raise UpstreamError(0, str(e)) from e

        if not response.ok:
            raise UpstreamError(response.status_code, response.text)

        if not response.content:
            return []
        return response.json()


def get_rest_client():
    """Return the app's REST client, building it from config on first use."""
    client = current_app.extensions.get('supabase_rest')
    if client is None:
        client = SupabaseRestClient(
            current_app.config.get('SUPABASE_URL'),
            current_app.config.get('SUPABASE_KEY'),
            timeout=current_app.config.get('SUPABASE_TIMEOUT', 10)
        )
        current_app.extensions['supabase_rest'] = client
    return client

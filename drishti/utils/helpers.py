import base64
import json
import time
from flask import current_app, request


def get_json_body():
    """Return the request JSON, or an empty dict for missing/invalid bodies."""
    data = request.get_json(silent=True)
    return data if data is not None else {}


def get_json_object():
    """Like get_json_body, but anything other than a JSON object becomes {}."""
    data = get_json_body()
    return data if isinstance(data, dict) else {}


def encode_features(features):
    """Serialize a pricing feature list into the text column format."""
    if isinstance(features, (list, tuple)):
        return json.dumps(list(features), ensure_ascii=False)
    return features


def decode_features(features):
    """Turn a stored features value back into a list.

    Accepts either the JSON text stored in the column or a value the store
    already decoded.
    """
    if features is None:
        return []
    if isinstance(features, str):
        try:
            decoded = json.loads(features)
        except ValueError:
            current_app.logger.warning(f"Undecodable pricing features: {features!r}")
            return []
        return decoded if isinstance(decoded, list) else [decoded]
    return features


def make_admin_token(username):
    """Opaque login token: base64 of ``username:<epoch millis>``.

    Nothing on the server records or verifies it.
    """
    raw = f"{username}:{int(time.time() * 1000)}"
    return base64.b64encode(raw.encode('utf-8')).decode('ascii')

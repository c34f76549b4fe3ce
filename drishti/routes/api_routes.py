from flask import Blueprint, current_app, jsonify
from drishti.models import CRUD_RESOURCES, CONTACT, SettingsStore
from drishti.utils.helpers import get_json_body, get_json_object
from drishti.utils.supabase_client import UpstreamError, get_rest_client
from drishti.utils.email_utils import send_contact_notification

api_bp = Blueprint('api', __name__, url_prefix='/api')


def list_rows(resource):
    """Fetch a resource's rows; an upstream failure yields an empty list."""
    try:
        rows = get_rest_client().request(resource.list_path())
    except UpstreamError as e:
        current_app.logger.warning(f"Listing {resource.table} failed: {e}")
        return []
    return resource.present_all(rows)


def register_crud(blueprint, resource):
    """Attach list/create/update/delete routes for one resource."""
    base = f'/{resource.name}'
    endpoint = resource.name.replace('-', '_')

    def list_view():
        return jsonify(list_rows(resource))

    def create_view():
        try:
            rows = get_rest_client().request(
                resource.table,
                method='POST',
                body=resource.for_create(get_json_body())
            )
        except UpstreamError as e:
            current_app.logger.error(f"Creating {resource.table} row failed: {e}")
            return jsonify({'error': str(e)}), 500
        return jsonify(resource.present(rows[0]) if rows else {})

    def update_view(row_id):
        try:
            get_rest_client().request(
                resource.row_path(row_id),
                method='PATCH',
                body=resource.for_write(get_json_body())
            )
        except UpstreamError as e:
            current_app.logger.error(f"Updating {resource.table} #{row_id} failed: {e}")
            return jsonify({'error': str(e)}), 500
        return jsonify({'success': True})

    def delete_view(row_id):
        try:
            get_rest_client().request(resource.row_path(row_id), method='DELETE')
        except UpstreamError as e:
            current_app.logger.error(f"Deleting {resource.table} #{row_id} failed: {e}")
            return jsonify({'error': str(e)}), 500
        return jsonify({'success': True})

    blueprint.add_url_rule(base, f'list_{endpoint}', list_view, methods=['GET'])
    blueprint.add_url_rule(base, f'create_{endpoint}', create_view, methods=['POST'])
    blueprint.add_url_rule(f'{base}/<row_id>', f'update_{endpoint}', update_view, methods=['PUT'])
    blueprint.add_url_rule(f'{base}/<row_id>', f'delete_{endpoint}', delete_view, methods=['DELETE'])


for _resource in CRUD_RESOURCES:
    register_crud(api_bp, _resource)


# ===========================
# Settings
# ===========================

@api_bp.route('/settings', methods=['GET'])
def get_settings():
    try:
        settings = SettingsStore(get_rest_client()).all()
    except UpstreamError as e:
        current_app.logger.warning(f"Loading settings failed: {e}")
        settings = {}
    return jsonify(settings)


@api_bp.route('/settings', methods=['POST'])
def save_settings():
    updates = get_json_body()
    if not isinstance(updates, dict):
        return jsonify({'success': False, 'message': 'Settings must be a JSON object'}), 400

    try:
        SettingsStore(get_rest_client()).update(updates)
    except UpstreamError as e:
        current_app.logger.error(f"Saving settings failed: {e}")
        return jsonify({'success': False, 'message': str(e)}), 500

    current_app.logger.info(f"Settings updated: {', '.join(sorted(updates)) or 'none'}")
    return jsonify({'success': True})


# ===========================
# Contact form
# ===========================

@api_bp.route('/contact', methods=['GET'])
def list_contacts():
    return jsonify(list_rows(CONTACT))


@api_bp.route('/contact', methods=['POST'])
def submit_contact():
    submission = CONTACT.for_create(get_json_object())

    try:
        get_rest_client().request(CONTACT.table, method='POST', body=submission)
    except UpstreamError as e:
        current_app.logger.error(f"Saving contact submission failed: {e}")
        return jsonify({'success': False, 'message': str(e)}), 500

    send_contact_notification(submission)
    return jsonify({'success': True, 'message': current_app.config['CONTACT_SUCCESS_MESSAGE']})

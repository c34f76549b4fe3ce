from flask import Blueprint, current_app, jsonify, request
from drishti.models import AdminAccounts
from drishti.utils.helpers import get_json_object, make_admin_token
from drishti.utils.supabase_client import UpstreamError, get_rest_client
from drishti.utils.supabase_storage import InvalidImageError, StorageError, upload_image

admin_api_bp = Blueprint('admin_api', __name__, url_prefix='/api/admin')


@admin_api_bp.route('/login', methods=['POST'])
def login():
    data = get_json_object()
    username = data.get('username')
    password = data.get('password')

    try:
        admin = AdminAccounts(get_rest_client()).authenticate(username, password)
    except UpstreamError as e:
        current_app.logger.error(f"Admin lookup failed: {e}")
        return jsonify({'success': False, 'message': str(e)}), 500

    if admin is None:
        current_app.logger.info(f"Failed admin login for '{username}'")
        return jsonify({'success': False, 'message': 'Invalid credentials'}), 401

    current_app.logger.info(f"Admin '{username}' logged in")
    return jsonify({
        'success': True,
        'token': make_admin_token(username),
        'admin': {'id': admin.get('id'), 'username': username}
    })


@admin_api_bp.route('/change-password', methods=['POST'])
def change_password():
    data = get_json_object()
    username = data.get('username')
    new_password = data.get('newPassword')
    if not isinstance(new_password, str):
        return jsonify({'success': False, 'message': 'New password is required'}), 400

    accounts = AdminAccounts(get_rest_client())
    try:
        admin = accounts.authenticate(username, data.get('currentPassword'))
        if admin is None:
            return jsonify({'success': False, 'message': 'Invalid current password'}), 401
        accounts.set_password(admin['id'], new_password)
    except UpstreamError as e:
        current_app.logger.error(f"Password change for '{username}' failed: {e}")
        return jsonify({'success': False, 'message': str(e)}), 500

    current_app.logger.info(f"Password changed for admin '{username}'")
    return jsonify({'success': True, 'message': 'Password updated successfully'})


@admin_api_bp.route('/upload', methods=['POST'])
def upload():
    """Store an image in Supabase Storage and hand back its public URL."""
    file = request.files.get('image')
    if not file or not file.filename:
        return jsonify({'success': False, 'message': 'No image file provided'}), 400

    try:
        url = upload_image(file, request.form.get('folder', 'uploads'))
    except InvalidImageError as e:
        return jsonify({'success': False, 'message': str(e)}), 400
    except StorageError as e:
        current_app.logger.error(f"Image upload failed: {e}")
        return jsonify({'success': False, 'message': str(e)}), 500

    return jsonify({'success': True, 'url': url})

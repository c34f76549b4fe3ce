"""
Supabase Storage utility for uploading site images
"""
import io
import os
import uuid
from flask import current_app
from supabase import create_client, Client
from werkzeug.utils import secure_filename
from PIL import Image

ALLOWED_EXTENSIONS = {'.png', '.jpg', '.jpeg', '.webp', '.gif'}
UPLOAD_FOLDERS = {'slides', 'gallery', 'logo'}


class StorageError(Exception):
    """Raised when an image cannot be processed or stored."""


class InvalidImageError(StorageError):
    """The uploaded file is not an image we accept."""


def get_supabase_client() -> Client:
    """Initialize and return Supabase client"""
    supabase_url = current_app.config.get('SUPABASE_URL')
    supabase_key = current_app.config.get('SUPABASE_KEY')

    if not supabase_url or not supabase_key:
        raise StorageError("Supabase credentials not configured")

    return create_client(supabase_url, supabase_key)


def resize_image(stream, file_ext, width, height):
    """
    Shrink an image to fit within width x height, keeping aspect ratio

    Returns:
        Tuple (image_bytes, content_type)
    """
    img = Image.open(stream)

    # Convert RGBA to RGB if necessary (for JPEG)
    if img.mode in ('RGBA', 'P') and file_ext in ('.jpg', '.jpeg'):
        img = img.convert('RGBA')
        rgb_img = Image.new('RGB', img.size, (255, 255, 255))
        rgb_img.paste(img, mask=img.split()[3])
        img = rgb_img

    img.thumbnail((width, height), Image.Resampling.LANCZOS)

    img_bytes = io.BytesIO()
    if file_ext in ('.jpg', '.jpeg'):
        img.save(img_bytes, format='JPEG', quality=85)
        content_type = 'image/jpeg'
    elif file_ext == '.webp':
        img.save(img_bytes, format='WEBP', quality=85)
        content_type = 'image/webp'
    else:
        img.save(img_bytes, format='PNG', optimize=True)
        content_type = 'image/png'

    return img_bytes.getvalue(), content_type


def upload_image(file, folder='uploads'):
    """
    Resize an uploaded image and store it in the site bucket

    Args:
        file: The FileStorage from request.files
        folder: Folder inside the bucket; unknown names go to 'uploads'

    Returns:
        Public URL of the stored image

    Raises:
        StorageError: when the file is not an image or the upload fails
    """
    if folder not in UPLOAD_FOLDERS:
        folder = 'uploads'

    filename = secure_filename(file.filename or '')
    file_ext = os.path.splitext(filename)[1].lower()
    if file_ext not in ALLOWED_EXTENSIONS:
        raise InvalidImageError(f"Unsupported image type: {file_ext or 'none'}")

    try:
        data, content_type = resize_image(
            file.stream,
            file_ext,
            current_app.config.get('IMAGE_MAX_WIDTH', 1600),
            current_app.config.get('IMAGE_MAX_HEIGHT', 1000)
        )
    except (OSError, ValueError) as e:
        raise InvalidImageError(f"Could not read image: {e}") from e

    # PNG fallback for gif and friends
    if content_type == 'image/png' and file_ext != '.png':
        filename = os.path.splitext(filename)[0] + '.png'
    file_path = f"{folder}/{uuid.uuid4().hex}_{filename}"
    bucket_name = current_app.config.get('SUPABASE_STORAGE_BUCKET', 'drishti')

    try:
        bucket = get_supabase_client().storage.from_(bucket_name)
        bucket.upload(file_path, data, file_options={"content-type": content_type})
        public_url = bucket.get_public_url(file_path)
    except StorageError:
        raise
    except Exception as e:
        raise StorageError(f"Upload to bucket '{bucket_name}' failed: {e}") from e

    current_app.logger.info(f"Image uploaded to Supabase: {public_url}")
    return public_url

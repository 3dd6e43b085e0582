import os
import posixpath
from werkzeug.utils import secure_filename
from flask import current_app

IMAGE_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp'}
VIDEO_EXTENSIONS = {'mp4', 'mov', 'avi', 'webm'}
ALLOWED_EXTENSIONS = IMAGE_EXTENSIONS | VIDEO_EXTENSIONS


def allowed_file(filename):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


def upload_root():
    folder = current_app.config.get('UPLOAD_FOLDER', 'uploads')
    if os.path.isabs(folder):
        return folder
    return os.path.join(current_app.instance_path, folder)


def clean_storage_path(path):
    """
    Normalize a storage path such as ``blog/1700000000-ab12cd.jpg``.
    Every segment goes through secure_filename, so ``..`` cannot escape the root.
    """
    segments = [secure_filename(part) for part in path.replace('\\', '/').split('/')]
    segments = [part for part in segments if part]
    if not segments:
        raise ValueError("Storage path is empty")
    return posixpath.join(*segments)


def save_file(file, path):
    if not file or not file.filename or not allowed_file(file.filename):
        raise ValueError("File type not allowed")

    storage_path = clean_storage_path(path)
    if not allowed_file(storage_path):
        raise ValueError("File type not allowed")

    file_path = os.path.join(upload_root(), *storage_path.split('/'))
    os.makedirs(os.path.dirname(file_path), exist_ok=True)

    file.save(file_path)

    # Public URL (local for dev, CDN/bucket URL in production)
    base_url = current_app.config.get('PUBLIC_MEDIA_URL', '/uploads').rstrip('/')
    return f"{base_url}/{storage_path}"

import os
import uuid
from werkzeug.utils import secure_filename
from flask import current_app
from habitare.domain.invariants.exceptions import UnsupportedMediaError

ALLOWED_EXTENSIONS = {"png", "jpg", "jpeg", "gif", "webp", "avif", "svg"}
UPLOAD_URL_PREFIX = "/uploads/"


def allowed_file(filename):
    return "." in filename and filename.rsplit(".", 1)[1].lower() in ALLOWED_EXTENSIONS


def has_upload(file):
    return file is not None and bool(file.filename)


def save_file(file, prefix="img"):
    """
    Store an uploaded image under UPLOAD_FOLDER and return its public URL.

    Stored names are "<prefix>-<uuid>.<ext>" so two editors uploading
    "capa.jpg" never overwrite each other.
    """
    if not allowed_file(file.filename):
        raise UnsupportedMediaError(f"Tipo de arquivo não permitido: {file.filename}")

    filename = secure_filename(file.filename)
    ext = filename.rsplit(".", 1)[1].lower()
    unique_filename = f"{prefix}-{uuid.uuid4().hex}.{ext}"

    upload_folder = current_app.config["UPLOAD_FOLDER"]
    os.makedirs(upload_folder, exist_ok=True)
    file.save(os.path.join(upload_folder, unique_filename))

    current_app.logger.info("Stored upload %s as %s", file.filename, unique_filename)
    return f"{UPLOAD_URL_PREFIX}{unique_filename}"


def save_files(files, prefix="img"):
    """All or nothing: a rejected file removes the ones already stored."""
    urls = []
    try:
        for file in files:
            if has_upload(file):
                urls.append(save_file(file, prefix=prefix))
    except Exception:
        delete_files(urls)
        raise
    return urls


def delete_file(file_url):
    """
    Deletes a previously uploaded file given its public URL.
    External URLs (e.g. a pasted Unsplash link) are left alone.
    """
    if not file_url or not file_url.startswith(UPLOAD_URL_PREFIX):
        return False

    filename = secure_filename(file_url[len(UPLOAD_URL_PREFIX):])
    file_path = os.path.join(current_app.config["UPLOAD_FOLDER"], filename)

    if os.path.exists(file_path):
        try:
            os.remove(file_path)
            return True
        except OSError:
            current_app.logger.exception("Failed to delete file %s", file_path)
            return False
    return False


def delete_files(file_urls):
    return sum(1 for url in file_urls if delete_file(url))

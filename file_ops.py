import os
import shutil
from send2trash import send2trash
from utils import to_long_path


def send_to_recycle_bin(path: str) -> None:
    """Move file at path to the OS recycle bin."""
    send2trash(to_long_path(path))


def quarantine_file(path: str, dest_dir: str) -> str:
    """Move file to a quarantine directory, avoiding name collisions.

    Returns the destination path.
    """
    os.makedirs(dest_dir, exist_ok=True)
    name = os.path.basename(path)
    base, ext = os.path.splitext(name)
    dest = os.path.join(dest_dir, name)
    counter = 1
    while os.path.exists(dest):
        dest = os.path.join(dest_dir, f"{base}_{counter}{ext}")
        counter += 1
    shutil.move(to_long_path(path), to_long_path(dest))
    return dest


def clean_up_images(folder: str, names, action, ui_progress=None, ui_log=None):
    """Apply action(path) to each named file in folder.

    A failing file is recorded and the rest are still processed.
    Returns (done, errors) where errors is a list of (path, message).
    """
    ui_progress = ui_progress or (lambda txt, pct: None)
    ui_log = ui_log or (lambda msg: None)
    names = list(names)
    total = len(names)
    done = 0
    errors = []
    for i, name in enumerate(names, start=1):
        path = os.path.join(folder, name)
        try:
            action(path)
            done += 1
            ui_log(f"Removed: {path}")
        except OSError as e:
            errors.append((path, str(e)))
            ui_log(f"Failed: {path} ({e})")
        ui_progress(f"Cleaning up {i}/{total}", i / max(1, total))
    return done, errors

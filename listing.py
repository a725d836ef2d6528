import os

from utils import iter_files, PREFIX_PARENT, PREFIX_SELECTED


class DirectoryUnavailable(OSError):
    """The chosen image folder is missing, not a folder, or unreadable."""
    def __init__(self, folder: str, reason: str):
        super().__init__(f"Cannot list folder '{folder}': {reason}")
        self.folder = folder
        self.reason = reason


def list_images(folder: str, ui_log=None) -> list[str]:
    """Names of the regular files directly inside folder, sorted case-insensitively."""
    ui_log = ui_log or (lambda msg: None)
    if not folder:
        raise DirectoryUnavailable(folder, "no folder selected")
    if not os.path.exists(folder):
        raise DirectoryUnavailable(folder, "folder does not exist")
    if not os.path.isdir(folder):
        raise DirectoryUnavailable(folder, "not a folder")
    try:
        names = list(iter_files(folder))
    except OSError as e:
        raise DirectoryUnavailable(folder, e.strerror or str(e)) from e
    names.sort(key=str.lower)
    for name in names:
        ui_log(f"Listed: {name}")
    return names


def project_folder_name(folder: str, mode: str = PREFIX_PARENT) -> str:
    """Folder name used as the "<project>/" part of reference lines."""
    path = os.path.abspath(folder)
    if mode == PREFIX_SELECTED:
        return os.path.basename(path)
    if mode != PREFIX_PARENT:
        raise ValueError(f"Unknown prefix mode: {mode}")
    parent = os.path.dirname(path)
    if parent == path:
        # the filesystem root has no parent
        return ""
    return os.path.basename(parent)


# ================== Image Folder Scanner ==================
class ImageFolderScanner:
    """
    List one image folder (flat, no subfolders) and work out the project
    folder name its reference lines are expected to start with.
    """
    def __init__(
        self,
        folder: str,
        mode: str = PREFIX_PARENT,
        ui_progress=None,
        ui_log=None,
    ):
        self.folder = folder
        self.mode = mode
        self.ui_progress = ui_progress or (lambda txt, pct: None)
        self.ui_log = ui_log or (lambda msg: None)

    def run(self) -> dict:
        self.ui_progress(f"Listing {self.folder}…", 0.0)
        images = list_images(self.folder, ui_log=self.ui_log)
        project = project_folder_name(self.folder, self.mode)
        self.ui_progress(f"Found {len(images)} file(s) in {self.folder}.", 1.0)
        return {
            "path": os.path.abspath(self.folder),
            "project_folder": project,
            "images": images,
        }

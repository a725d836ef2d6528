import os
from pathlib import Path

# ================== Config ==================
WINDOW_TITLE = "Unused Image Finder"
FOLDER_PLACEHOLDER = "<Select the images folder.>"
REFERENCES_PLACEHOLDER = "<Paste list of imported graphic references here.>"
NO_UNUSED_MESSAGE = "<No unused images found.>"
DEFAULT_QUARANTINE_DIRNAME = "_unused_images"
PREVIEW_LIMIT = 20  # file names listed in a cleanup confirmation

# Which folder name is used as the "<project>/" segment of a reference line
PREFIX_PARENT = "parent"      # folder one level above the image folder
PREFIX_SELECTED = "selected"  # the image folder itself
PREFIX_MODES = {
    PREFIX_PARENT: "Parent folder name",
    PREFIX_SELECTED: "Image folder name",
}


def to_long_path(p: str | Path) -> str:
    r"""Return a path string with Windows long-path prefixes when needed."""
    path_str = str(p)
    if os.name != "nt":
        return path_str
    path_str = os.path.abspath(path_str)
    if path_str.startswith("\\\\?\\"):
        return path_str
    if path_str.startswith("\\\\"):
        return "\\\\?\\UNC\\" + path_str[2:]
    return "\\\\?\\" + path_str

def human_size(n: int) -> str:
    x = float(n)
    for u in ("B","KB","MB","GB","TB"):
        if x < 1024 or u == "TB":
            return f"{x:.1f} {u}" if u != "B" else f"{int(x)} {u}"
        x /= 1024.0

def iter_files(folder: str | Path):
    """Yield regular files directly inside folder (no recursion)."""
    with os.scandir(to_long_path(folder)) as it:
        for entry in it:
            if entry.is_file():
                yield entry.name

def total_size(folder: str | Path, names) -> int:
    """Sum of file sizes for names inside folder; unreadable files count as 0."""
    size = 0
    for name in names:
        try:
            size += os.path.getsize(to_long_path(os.path.join(folder, name)))
        except OSError:
            continue
    return size

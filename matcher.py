from utils import NO_UNUSED_MESSAGE

# ================== Unused Image Matcher ==================
# A reference line looks like "Graphics/screenshot.png @ 120 dpi 100".
# An image counts as used when a line starts with "<project>/<image> ",
# compared case-insensitively. Anything after that space is ignored.


def reference_prefix(project_folder: str, image: str) -> str:
    """Expected start of a reference line for image."""
    return f"{project_folder}/{image} "


def find_unused_images(all_images, used_images, project_folder: str) -> list[str]:
    """
    Return the images from all_images that no line in used_images references.
    Order of all_images is kept. Inputs are only read, never modified.
    Image names are compared as plain text, so "x(1).eps" or "v1.2.png"
    never match anything but themselves. Only letter case is ignored:
    str.lower() is applied to both sides, no other Unicode folding.
    """
    lines = [line.lower() for line in used_images]
    unused = []
    for image in all_images:
        prefix = reference_prefix(project_folder, image).lower()
        # any() stops at the first referencing line
        if not any(line.startswith(prefix) for line in lines):
            unused.append(image)
    return unused


def split_reference_lines(text: str) -> list[str]:
    """
    Split pasted text into lines the way a line reader does: \\n, \\r\\n and
    \\r all end a line, content is kept as-is, and a trailing terminator does
    not add an empty last line.
    """
    if not text:
        return []
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def format_unused(unused) -> str:
    """Text for the results area; an empty result gets an explicit message."""
    if not unused:
        return NO_UNUSED_MESSAGE
    return "".join(f"{name}\n" for name in unused)

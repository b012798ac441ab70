"""Content version comparison (YYYY.MM.DD.PATCH)."""


def _component(part: str) -> tuple[int, int | str]:
    # Numeric parts sort before non-numeric ones and compare as integers
    part = part.strip()
    if part.isascii() and part.isdigit():
        return (0, int(part))
    return (1, part)


def compare_versions(a: str, b: str) -> int:
    """Return -1, 0 or 1 comparing dot-separated versions component by component.

    Missing trailing components count as zero, so "2024.12.15" == "2024.12.15.0".
    """
    left = a.split(".")
    right = b.split(".")
    width = max(len(left), len(right))
    left += ["0"] * (width - len(left))
    right += ["0"] * (width - len(right))
    for x, y in zip(left, right):
        cx, cy = _component(x), _component(y)
        if cx != cy:
            return -1 if cx < cy else 1
    return 0


def is_newer(current: str, remote: str) -> bool:
    """True when the published remote version should replace current.

    The manifest is authoritative: a republished lower version (a rollback)
    replaces current content just like a later one.
    """
    return compare_versions(remote, current) != 0

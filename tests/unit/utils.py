from pathlib import Path


def write_tree(root: Path, files: dict) -> Path:
    """Create files under root from a {relative path: bytes or str} mapping."""
    for relpath, content in files.items():
        path = root / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content)
    return root


def read_tree(root: Path) -> dict:
    """Return {relative path: bytes} for every file under root."""
    return {
        str(path.relative_to(root)): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }

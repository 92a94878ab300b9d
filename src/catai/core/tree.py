# src/catai/core/tree.py
from pathlib import PurePosixPath
from typing import Dict, List

DIR_ICON = "📁 "
FILE_ICON = "📄 "


def generate_file_tree(file_names: List[str]) -> str:
    """Renders display-relative file names as an indented tree, folders and files mixed in name order."""
    tree_dict: Dict = {}
    for name in file_names:
        current_level = tree_dict
        for part in PurePosixPath(name).parts:
            current_level = current_level.setdefault(part, {})

    lines: List[str] = []

    def _generate_lines_recursive(subtree: Dict, prefix: str):
        entries = sorted(subtree.items())
        for i, (name, content) in enumerate(entries):
            is_last = (i == len(entries) - 1)
            connector = "└── " if is_last else "├── "
            icon = DIR_ICON if content else FILE_ICON
            lines.append(f"{prefix}{connector}{icon}{name}")

            if content:
                new_prefix = prefix + ("    " if is_last else "│   ")
                _generate_lines_recursive(content, new_prefix)

    _generate_lines_recursive(tree_dict, "")
    return "\n".join(lines)

from collections import namedtuple

PROGRAM_NAME = "ai2fs"
VERSION = "1.0.0"

# prefix: literal text the stripped line must start with
# needs_space: the prefix only counts when whitespace follows it
PathMarker = namedtuple("PathMarker", ["prefix", "needs_space"])

# First match wins, so longer markers come before the shorter ones they overlap
# ("-->" before "->" before "-", "##" before "#").
PATH_MARKERS = (
    PathMarker("-->", False),   # --> path/to/file.tsx
    PathMarker("->", False),    # -> path/to/file.tsx
    PathMarker("---", False),   # --- path/to/file.yml
    PathMarker("***", False),   # *** path/to/file.yml
    PathMarker("##", False),    # ## path/to/file.config
    PathMarker("//", False),    # // path/to/file.js
    PathMarker("=>", False),    # => path/to/file.html
    PathMarker("#", True),      # # path/to/file.py
    PathMarker(">", True),      # > path/to/file.md
    PathMarker("[", False),     # [ path/to/file.css ]
    PathMarker("-", True),      # - path/to/file.json
)

# Illustrative directory trees ("├── src/index.ts") are never markers
TREE_DRAWING_TOKENS = ("├", "└", "│", "|--")

BRACKET_CLOSE = "]"

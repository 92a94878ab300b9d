# src/catai/config.py

__version__ = "1.0.0"

DEFAULT_MAX_SIZE = "100k"

# Directory (or file) names never descended into while walking an input directory
IGNORED_DIRS = frozenset({
    "node_modules",
    ".git",
    ".svn",
    ".hg",
    "dist",
    "build",
    "__pycache__",
    ".cache",
    ".vscode",
    ".idea",
    "vendor",
})

BINARY_EXTENSIONS = frozenset({
    # images
    ".png", ".jpg", ".jpeg", ".gif", ".ico", ".webp", ".bmp",
    # documents / archives
    ".pdf", ".zip", ".tar", ".gz", ".rar", ".7z",
    # executables
    ".exe", ".dll", ".so", ".dylib", ".bin",
    # audio / video
    ".mp3", ".mp4", ".wav", ".avi", ".mov", ".mkv",
    # fonts
    ".woff", ".woff2", ".ttf", ".eot", ".otf",
})

# Binary sniffing: bytes sampled from the head of a file, and the share of NUL bytes
# at or above which the sample counts as binary.
SAMPLE_SIZE = 8000
NULL_RATIO_THRESHOLD = 0.1

CHARS_PER_TOKEN = 3.5

# Context window sizes (tokens), in display order
TOKEN_LIMITS = {
    "claude": 200_000,
    "gpt4": 128_000,
    "gpt4o": 128_000,
    "gpt3": 16_000,
    "gemini": 1_000_000,
}

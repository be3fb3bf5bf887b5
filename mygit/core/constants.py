"""Module holding constants used across mygit."""

PROG_NAME = "mygit"
DEFAULT_GIT_BIN = "git"
DEFAULT_GH_BIN = "gh"
DEFAULT_CLONE_ROOT = "."
DEFAULT_COMMENT_MARKER = "#"
NOTES_SUFFIX = ".md"
NOTES_PREFIX = "mygit-release-"
EDITOR_EXAMPLE = "export EDITOR='code --wait'   # or: export EDITOR=nano"
ACCEPTED_URL_SHAPES = ("https://host/owner/repo", "git@host:owner/repo")
SCHEME_TOKENS = frozenset({"http", "https", "ssh", "git", "file", "ftp", "ftps"})

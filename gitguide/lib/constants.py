"""Shared constants for gitguide."""

import re

MAIN_BRANCH = "main"

# Branch names accepted by `git branch <name>` / `git checkout -b <name>`
BRANCH_NAME_PATTERN = re.compile(r'^[A-Za-z0-9_./-]+$')

# Filenames accepted by `touch`; dotfiles are rejected separately
FILENAME_PATTERN = re.compile(r'^[^/\\:*?"<>|]+$')

HASH_ALPHABET = "0123456789abcdef"
HASH_LENGTH = 7

README = "README.md"

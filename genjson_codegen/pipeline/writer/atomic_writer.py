"""
Atomic file writer for generated headers.

Ensures that file writes are atomic to prevent data corruption
from interrupted operations, and skips writes whose content is
unchanged so regeneration does not touch up-to-date headers.
"""

from __future__ import annotations

import re
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..errors import CommitError, OutputValidationError

CONTINUATION = "\\"

# Double-quoted C++ string literal, escapes included
_STRING_LITERAL = re.compile(r'"(?:[^"\\\n]|\\.)*"')


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Validate the content
    2. Write to a temporary file in the same directory
    3. Atomically replace the target file

    This ensures that an interrupted write operation never leaves
    the target file in an incomplete state.
    """

    def __init__(
        self,
        macro_name: str = "GENJSON_SERIALIZERS",
        validate_header: Callable[[str], None] | None = None,
        atomic: bool = True,
    ):
        """Initialize the atomic writer.

        Args:
            macro_name: Macro every generated header must define
            validate_header: Optional validation function for generated headers
            atomic: Write through a temporary file and rename
        """
        self._macro_name = macro_name
        self._validate_header = validate_header or self._default_validate_header
        self._atomic = atomic

    def commit(self, path: Path, content: str, validate: bool = True) -> bool:
        """Write content unless the file already holds exactly that content.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Returns:
            True if the file was written, False if it was already up to date

        Raises:
            OutputValidationError: If validation fails
            CommitError: If the existing file is not valid UTF-8
            OSError: If file operations fail
        """
        if path.is_file():
            try:
                existing = path.read_text(encoding="utf-8")
            except UnicodeDecodeError as e:
                raise CommitError(f"Cannot read existing {path}: {e}") from e
            if existing == content:
                return False

        self.write(path, content, validate)
        return True

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file, atomically unless disabled.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            OutputValidationError: If validation fails
            OSError: If file operations fail
        """
        if validate:
            self._validate_header(content)

        # Ensure parent directory exists
        path.parent.mkdir(parents=True, exist_ok=True)

        if not self._atomic:
            path.write_text(content, encoding="utf-8")
            return

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )

        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            # On POSIX systems, rename() is atomic if source and dest are on same filesystem
            temp_path.replace(path)

        except BaseException:
            # Clean up temp file on any error
            temp_path.unlink(missing_ok=True)
            raise

    def _default_validate_header(self, content: str) -> None:
        """Default validation of a generated header.

        Args:
            content: Header text to validate

        Raises:
            OutputValidationError: If validation fails
        """
        code = _STRING_LITERAL.sub('""', content)
        open_braces = code.count("{")
        close_braces = code.count("}")
        if open_braces != close_braces:
            raise OutputValidationError(f"Generated header has unbalanced braces: {open_braces} open, {close_braces} close")

        lines = content.split("\n")
        define_prefix = f"#define {self._macro_name}("
        start = next((i for i, line in enumerate(lines) if line.startswith(define_prefix)), None)
        if start is None:
            raise OutputValidationError(f"Generated header is missing the {self._macro_name} definition")

        # Every line of the macro body continues until the terminating blank line
        for number, line in enumerate(lines[start:], start=start + 1):
            if not line:
                break
            if not line.endswith(CONTINUATION):
                raise OutputValidationError(f"Line {number} of the {self._macro_name} definition is not continued: {line!r}")

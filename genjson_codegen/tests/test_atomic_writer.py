"""
Tests for the atomic header writer.
"""

from __future__ import annotations

import pytest

from genjson_codegen.pipeline.errors import CommitError, OutputValidationError
from genjson_codegen.pipeline.writer import AtomicWriter

VALID_HEADER = '#include "GenJsonSerializer.h"\n\n#undef GENJSON_SERIALIZERS\n#define GENJSON_SERIALIZERS(...) \\\ntemplate <> \\\nstruct A \\\n{ \\\n}; \\\n\\\n\n'


def leftover_temp_files(directory):
    return [p for p in directory.iterdir() if p.name.endswith(".tmp")]


def test_commit_writes_new_file(tmp_path):
    path = tmp_path / "nested" / "Point.genjson.h"
    assert AtomicWriter().commit(path, VALID_HEADER) is True
    assert path.read_text(encoding="utf-8") == VALID_HEADER
    assert leftover_temp_files(path.parent) == []


def test_commit_skips_identical_content(tmp_path):
    path = tmp_path / "Point.genjson.h"
    writer = AtomicWriter()
    writer.commit(path, VALID_HEADER)

    assert writer.commit(path, VALID_HEADER) is False


def test_commit_replaces_changed_content(tmp_path):
    path = tmp_path / "Point.genjson.h"
    path.write_text("old", encoding="utf-8")

    assert AtomicWriter().commit(path, VALID_HEADER) is True
    assert path.read_text(encoding="utf-8") == VALID_HEADER


def test_unbalanced_braces_are_rejected(tmp_path):
    path = tmp_path / "Broken.genjson.h"
    with pytest.raises(OutputValidationError) as exc_info:
        AtomicWriter().commit(path, VALID_HEADER.replace("}; \\", "; \\"))

    assert "unbalanced braces" in str(exc_info.value)
    assert not path.exists()
    assert leftover_temp_files(tmp_path) == []


def test_missing_macro_is_rejected(tmp_path):
    with pytest.raises(OutputValidationError) as exc_info:
        AtomicWriter().commit(tmp_path / "Empty.genjson.h", "#include <type_traits>\n")
    assert "GENJSON_SERIALIZERS" in str(exc_info.value)


def test_uncontinued_macro_line_is_rejected(tmp_path):
    with pytest.raises(OutputValidationError) as exc_info:
        AtomicWriter().commit(tmp_path / "Cut.genjson.h", VALID_HEADER.replace("struct A \\", "struct A"))
    assert "Line 6" in str(exc_info.value)


def test_custom_macro_name(tmp_path):
    header = VALID_HEADER.replace("GENJSON_SERIALIZERS", "MY_SERIALIZERS")
    assert AtomicWriter(macro_name="MY_SERIALIZERS").commit(tmp_path / "Custom.genjson.h", header)


def test_validation_can_be_disabled(tmp_path):
    path = tmp_path / "Raw.genjson.h"
    assert AtomicWriter().commit(path, "{", validate=False)
    assert path.read_text(encoding="utf-8") == "{"


def test_custom_validator(tmp_path):
    seen = []
    writer = AtomicWriter(validate_header=seen.append)
    writer.commit(tmp_path / "Any.genjson.h", "anything")
    assert seen == ["anything"]


def test_non_atomic_write(tmp_path):
    path = tmp_path / "Direct.genjson.h"
    AtomicWriter(atomic=False).commit(path, VALID_HEADER)
    assert path.read_text(encoding="utf-8") == VALID_HEADER


def test_braces_inside_string_literals_are_ignored(tmp_path):
    header = VALID_HEADER.replace("struct A \\", 'Writer.Key(TEXT("{")); \\\nGenJson::Write(TEXT("\\"}}"), Writer); \\')
    assert AtomicWriter().commit(tmp_path / "Braces.genjson.h", header)


def test_undecodable_existing_file_is_a_commit_error(tmp_path):
    path = tmp_path / "Binary.genjson.h"
    path.write_bytes(b"\xff\xfe\x00garbage")

    with pytest.raises(CommitError) as exc_info:
        AtomicWriter().commit(path, VALID_HEADER)

    assert "Binary.genjson.h" in str(exc_info.value)
    assert path.read_bytes() == b"\xff\xfe\x00garbage"

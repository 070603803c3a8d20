# Author: PB
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# tests/test_files.py

import pydantic
import pytest

from eiplint.data.files import FILE_RE, File, load_file, load_files
from eiplint.system.exceptions import ValidationError


class TestFileModel:
    def test_file_is_immutable(self):
        file = File(filename="EIPS/eip-1.md")
        with pytest.raises(pydantic.ValidationError):
            file.filename = "other.md"

    def test_empty_filename_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            File(filename="")

    def test_content_defaults_to_empty(self):
        assert File(filename="EIPS/eip-1.md").content == ""


class TestFilePattern:
    def test_captures_number(self):
        assert FILE_RE.search("EIPS/eip-1559.md").group(1) == "1559"

    def test_rejects_nested_folder(self):
        assert FILE_RE.search("EIPS/drafts/eip-1559.md") is None


class TestLoadFile:
    def test_load_relative_to_root(self, eip_repo):
        file = load_file(eip_repo / "EIPS" / "eip-1234.md", eip_repo)

        assert file.filename == "EIPS/eip-1234.md"
        assert file.content.startswith("---")

    def test_outside_root_raises(self, eip_repo, tmp_path):
        outside = tmp_path / "outside.md"
        outside.write_text("x")

        with pytest.raises(ValidationError, match="not inside repository root"):
            load_file(outside, eip_repo)

    def test_missing_file_raises(self, eip_repo):
        with pytest.raises(ValidationError, match="Cannot read"):
            load_file(eip_repo / "EIPS" / "eip-9.md", eip_repo)

    def test_load_files_keeps_order(self, eip_repo):
        files = load_files([eip_repo / "random.md", eip_repo / "EIPS" / "eip-1234.md"], eip_repo)

        assert [f.filename for f in files] == ["random.md", "EIPS/eip-1234.md"]

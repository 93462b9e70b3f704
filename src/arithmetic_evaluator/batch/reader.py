"""Load arithmetic expressions from a text file or an archive."""
from pathlib import Path
import tarfile
import tempfile
from typing import List
import zipfile

import py7zr
from py7zr.exceptions import Bad7zFile

# Errors raised by the archive libraries for corrupt or mislabelled files
ARCHIVE_ERRORS = (zipfile.BadZipFile, tarfile.TarError, Bad7zFile)


def load_expressions(input_file: Path) -> List[str]:
    """
    Read the expressions of a plain text file or of the first .txt file found in an archive.

    Lines are stripped and empty lines are dropped.

    :param Path input_file: Path to the input file or archive

    :return: Non-empty expression lines
    :rtype: List[str]
    :raises ValueError: If the archive is unsupported, unreadable or contains no .txt file
    """
    if input_file.suffix == ".txt":
        content = input_file.read_text(encoding="utf-8")
    else:
        content = extract_archive(input_file)
    return [line.strip() for line in content.splitlines() if line.strip()]


def _first_txt(names: List[str], archive_type: str) -> str:
    """Return the first .txt member name, or fail if the archive holds none."""
    txt_files = [name for name in names if name.endswith(".txt")]
    if not txt_files:
        raise ValueError(f"📄❌ No .txt file found in {archive_type} archive")
    return txt_files[0]


def extract_archive(archive_path: Path) -> str:
    """
    Extract the first .txt file found in a supported archive and return its content as a string.

    Supported formats:
    - .zip
    - .tar.xz
    - .7z

    :param Path archive_path: Path to the archive file

    :return: Content of the extracted .txt file
    :rtype: str
    :raises ValueError: If the archive is corrupt, holds no .txt file or its format is unsupported
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        tmpdir_path = Path(tmpdir)
        try:
            if archive_path.suffix == ".zip":
                with zipfile.ZipFile(archive_path, "r") as zf:
                    member = _first_txt(zf.namelist(), "zip")
                    zf.extract(member, path=tmpdir_path)
            elif archive_path.suffixes[-2:] == [".tar", ".xz"]:
                with tarfile.open(archive_path, "r:xz") as tf:
                    member = _first_txt([m.name for m in tf.getmembers() if m.isfile()], "tar.xz")
                    tf.extract(member, path=tmpdir_path, filter="data")
            elif archive_path.suffix == ".7z":
                with py7zr.SevenZipFile(archive_path, mode="r") as archive:
                    member = _first_txt(archive.getnames(), "7z")
                    archive.extract(targets=[member], path=tmpdir_path)
            else:
                raise ValueError(f"📄❌ Unsupported archive format: {archive_path.suffix}")
        except ARCHIVE_ERRORS as exc:
            raise ValueError(f"📄❌ Cannot read archive {archive_path.name}: {exc}") from exc

        return (tmpdir_path / member).read_text(encoding="utf-8")

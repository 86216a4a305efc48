"""Read statements from text files and archives."""
from pathlib import Path
import tarfile
import tempfile
from typing import List
import zipfile

import py7zr
from pydantic import BaseModel, ConfigDict, Field, FilePath


def _first_text_member(names: List[str], archive_path: Path) -> str:
    """Pick the first ``.txt`` member of an archive."""
    for name in names:
        if name.endswith(".txt"):
            return name
    raise ValueError(f"📄❌ No statement file (.txt) in {archive_path.name}")


class StatementReader(BaseModel):
    """
    Load statements, one per line, from a plain text file or an archive.

    Archives (.zip, .tar.xz, .7z) contribute their first ``.txt`` member.
    Blank lines are skipped.
    """

    model_config = ConfigDict(frozen=True)

    encoding: str = Field(default="utf-8", description="Encoding of the statement files")

    def read(self, input_file: FilePath) -> List[str]:
        """
        Read non-empty statements from a file or an archive.

        :param FilePath input_file: Path to the text file or archive

        :return: Stripped, non-empty statement lines
        :rtype: List[str]
        :raises ValueError: If the archive format is unsupported or contains no .txt file
        """
        input_file = Path(input_file)
        if input_file.suffix == ".txt":
            raw: bytes = input_file.read_bytes()
        else:
            raw = self._read_archive_member(input_file)

        content: str = raw.decode(self.encoding)
        return [line.strip() for line in content.splitlines() if line.strip()]

    def _read_archive_member(self, archive_path: Path) -> bytes:
        """
        Return the raw bytes of the statement file stored in an archive.

        :param Path archive_path: Path to the archive file

        :return: Content of the first .txt member
        :rtype: bytes
        :raises ValueError: If no .txt member is found or the format is unsupported
        """
        if archive_path.suffix == ".zip":
            with zipfile.ZipFile(archive_path) as zf:
                return zf.read(_first_text_member(zf.namelist(), archive_path))

        if archive_path.suffixes[-2:] == [".tar", ".xz"]:
            with tarfile.open(archive_path, "r:xz") as tf:
                names = [m.name for m in tf.getmembers() if m.isfile()]
                member = tf.extractfile(_first_text_member(names, archive_path))
                return member.read()

        if archive_path.suffix == ".7z":
            with py7zr.SevenZipFile(archive_path, mode="r") as archive:
                name = _first_text_member(archive.getnames(), archive_path)
                # py7zr only extracts to disk across its releases
                with tempfile.TemporaryDirectory() as tmpdir:
                    archive.extract(path=tmpdir, targets=[name])
                    return (Path(tmpdir) / name).read_bytes()

        raise ValueError(f"📄❌ Unsupported archive format: {''.join(archive_path.suffixes)}")

"""Load arithmetic expressions from text files and archives."""
from pathlib import Path, PurePosixPath
import tarfile
import tempfile
from typing import Callable, Dict, List, Optional
import zipfile

import py7zr
from pydantic import BaseModel, ConfigDict, Field, FilePath


# Reads the raw bytes of the first .txt member of an archive, None when there is none
MemberReader = Callable[[Path], Optional[bytes]]


def _is_expression_file(name: str) -> bool:
    return PurePosixPath(name).suffix == ".txt"


def _read_zip(archive_path: Path) -> Optional[bytes]:
    with zipfile.ZipFile(archive_path, "r") as zf:
        for info in zf.infolist():
            if not info.is_dir() and _is_expression_file(info.filename):
                return zf.read(info)
    return None


def _read_tar_xz(archive_path: Path) -> Optional[bytes]:
    with tarfile.open(archive_path, "r:xz") as tf:
        for member in tf:
            if member.isfile() and _is_expression_file(member.name):
                with tf.extractfile(member) as stream:
                    return stream.read()
    return None


def _read_7z(archive_path: Path) -> Optional[bytes]:
    with py7zr.SevenZipFile(archive_path, mode="r") as archive:
        names = [name for name in archive.getnames() if _is_expression_file(name)]
        if not names:
            return None
        # py7zr only extracts to disk across its releases
        with tempfile.TemporaryDirectory() as tmpdir:
            archive.extract(path=tmpdir, targets=[names[0]])
            return (Path(tmpdir) / names[0]).read_bytes()


# Archive kind, as the trailing suffixes of its file name, mapped to its member reader
ARCHIVE_READERS: Dict[str, MemberReader] = {
    ".zip": _read_zip,
    ".tar.xz": _read_tar_xz,
    ".7z": _read_7z,
}


class ExpressionLoader(BaseModel):
    """
    Read arithmetic expressions, one per line, from a plain text file or an archive.

    Supported formats:
    - .txt
    - .zip, .tar.xz and .7z archives; the first .txt member is read
    """

    model_config = ConfigDict(frozen=True)

    encoding: str = Field(default="utf-8", description="Encoding of the expression files")

    @staticmethod
    def archive_kind(path: Path) -> str:
        """
        Return the key of ARCHIVE_READERS matching a file name.

        :param Path path: Archive path

        :return: Archive kind such as ".zip" or ".tar.xz"
        :rtype: str
        :raises ValueError: If the format is not supported
        """
        name = path.name.lower()
        for kind in ARCHIVE_READERS:
            if name.endswith(kind):
                return kind
        raise ValueError(f"📄❌ Unsupported archive format: {''.join(path.suffixes) or path.name}")

    def read_bytes(self, input_file: FilePath) -> bytes:
        """
        Return the raw content of an expression file, or of the first .txt member of an archive.

        :param FilePath input_file: Path to the input file or archive

        :return: Undecoded file content
        :rtype: bytes
        :raises ValueError: If the archive format is unsupported or contains no .txt file
        """
        path = Path(input_file)
        if path.suffix == ".txt":
            return path.read_bytes()

        kind = self.archive_kind(path)
        content = ARCHIVE_READERS[kind](path)
        if content is None:
            raise ValueError(f"📄❌ {path.name}: no .txt member in {kind} archive")
        return content

    def load(self, input_file: FilePath) -> List[str]:
        """
        Return the non-empty, stripped lines of an expression file or archive.

        :param FilePath input_file: Path to the input file or archive

        :return: List of expressions
        :rtype: List[str]
        :raises ValueError: If the archive format is unsupported, contains no .txt file or cannot be decoded
        """
        content = self.read_bytes(input_file).decode(self.encoding)
        return [line.strip() for line in content.splitlines() if line.strip()]

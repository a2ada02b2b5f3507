"""Download, extraction and merge of the GeoLite2 CSV editions.

Sequence for one build::

    download ASN, City, Country archives   (streamed to unique files)
    extract City, Country, ASN             (unique directories, then descend
                                            through single-subdirectory levels)
    merge the three trees                  (one flat working directory)
    process_geolite2_csv(working directory)

Every path created carries a nanosecond timestamp so overlapping builds never
collide. Any failing step stops the sequence with a terse reason.
"""

from __future__ import annotations

import logging
import shutil
import tarfile
import tempfile
import time
import zipfile
from pathlib import Path, PurePosixPath
from typing import Dict, List, Optional

import requests

from ..errors import ArchiveFailure, IndexBuildError, IoFailure
from ..models import NetworkRecord
from ..settings import IndexSettings
from ..telemetry import start_span
from ..transport import download_to_file, redact
from .blocks import process_geolite2_csv

logger = logging.getLogger(__name__)

# key -> (edition id, label used in failure reasons)
GEOLITE2_EDITIONS: Dict[str, tuple[str, str]] = {
    "asn": ("GeoLite2-ASN-CSV", "ASN"),
    "city": ("GeoLite2-City-CSV", "City"),
    "country": ("GeoLite2-Country-CSV", "Country"),
}
DOWNLOAD_ORDER = ("asn", "city", "country")
EXTRACT_ORDER = ("city", "country", "asn")
EXTRACT_REASONS = {
    "asn": "Cannot extract ASN database",
    "city": "Cannot extract city database",
    "country": "Cannot extract country database",
}


def _unique_dir(parent: Path, stem: str) -> Path:
    return Path(tempfile.mkdtemp(prefix=f"{stem}_{time.time_ns()}_", suffix="_db", dir=parent))


def _check_member_name(name: str) -> None:
    member = PurePosixPath(name.replace("\\", "/"))
    if member.is_absolute() or ".." in member.parts:
        raise ArchiveFailure(f"unsafe archive member {name!r}")


def _extract_into(archive: Path, target: Path) -> None:
    if zipfile.is_zipfile(archive):
        with zipfile.ZipFile(archive) as bundle:
            for name in bundle.namelist():
                _check_member_name(name)
            bundle.extractall(target)
    elif tarfile.is_tarfile(archive):
        with tarfile.open(archive) as bundle:
            bundle.extractall(target, filter="data")
    else:
        raise ArchiveFailure(f"unsupported archive format: {archive.name}")


def descend_single_subdirectory(path: Path) -> Path:
    """Walk down while a level holds exactly one entry and it is a directory.

    The walk stops at the first level containing files. A level made only of
    several subdirectories has no unambiguous choice and is an error.

    Raises:
        ArchiveFailure: If a level contains more than one subdirectory and no files
    """
    while True:
        entries = list(path.iterdir())
        directories = [entry for entry in entries if entry.is_dir() and not entry.is_symlink()]
        if len(entries) == 1 and len(directories) == 1:
            path = directories[0]
            continue
        if len(directories) > 1 and len(directories) == len(entries):
            names = ", ".join(sorted(entry.name for entry in directories))
            raise ArchiveFailure(f"ambiguous archive layout in {path}: {names}")
        return path


def extract_archive(archive: Path, dest_root: Path, *, reason: str) -> tuple[Path, Path]:
    """Extract ``archive`` into a new unique directory under ``dest_root``.

    Returns:
        ``(extraction_root, data_dir)``: the directory created here, and the
        directory reached after descending through single-subdirectory levels

    The extraction directory is removed again when extraction fails.

    Raises:
        ArchiveFailure: Corrupt, unsupported, unsafe or ambiguous archive
        IoFailure: The extraction directory could not be created or written
    """
    try:
        root = _unique_dir(dest_root, archive.stem)
    except OSError as e:
        logger.error(f"{reason}: cannot create extraction directory ({e})")
        raise IoFailure(reason) from e

    logger.info(f"Extracting {archive.name} -> {root}")
    try:
        _extract_into(archive, root)
        data_dir = descend_single_subdirectory(root)
    except ArchiveFailure as e:
        logger.error(f"{reason}: {e}")
        shutil.rmtree(root, ignore_errors=True)
        raise ArchiveFailure(reason) from e
    except (zipfile.BadZipFile, tarfile.TarError) as e:
        logger.error(f"{reason}: {e}")
        shutil.rmtree(root, ignore_errors=True)
        raise ArchiveFailure(reason) from e
    except OSError as e:
        logger.error(f"{reason}: {e}")
        shutil.rmtree(root, ignore_errors=True)
        raise IoFailure(reason) from e
    return root, data_dir


def join_path_files(sources: List[Path], dest_root: Path) -> Path:
    """Copy every file of each source directory into one new working directory.

    Later sources overwrite earlier files with the same name. Subdirectories
    are not copied. The working directory is removed again if any copy fails.

    Raises:
        IoFailure: Any directory creation, listing or copy failed
    """
    reason = "Cannot copy database files"
    try:
        merged = _unique_dir(dest_root, "geoip")
    except OSError as e:
        logger.error(f"{reason}: cannot create working directory ({e})")
        raise IoFailure(reason) from e

    try:
        for source in sources:
            for entry in source.iterdir():
                if not entry.is_file():
                    logger.debug(f"Not merging non-file entry {entry}")
                    continue
                shutil.copyfile(entry, merged / entry.name)
    except OSError as e:
        logger.error(f"{reason}: {e}")
        shutil.rmtree(merged, ignore_errors=True)
        raise IoFailure(reason) from e
    logger.info(f"Merged {len(sources)} extracted trees into {merged}")
    return merged


class GeoLite2Orchestrator:
    """Acquire the GeoLite2 CSV editions and build geo records from them.

    Usage:
        orchestrator = GeoLite2Orchestrator(settings)
        records = orchestrator.build()
        geo_store.full_replace((r.prefix, r.metadata) for r in records)

    Files are created under ``settings.scratch_dir`` and removed once the build
    finishes unless ``keep_files`` is set.
    """

    def __init__(
        self,
        settings: IndexSettings,
        *,
        session: Optional[requests.Session] = None,
        keep_files: bool = False,
    ) -> None:
        """Create an orchestrator for one build.

        Raises:
            ValueError: If no MaxMind license key is configured
        """
        if not settings.maxmind_license_key:
            raise ValueError("Cannot download GeoLite2 editions without a license key")
        self.settings = settings
        self.session = session
        self.keep_files = keep_files
        self._created: List[Path] = []

    def download(self, key: str) -> Path:
        """Download one edition archive; ``key`` is ``asn``, ``city`` or ``country``."""
        edition, label = GEOLITE2_EDITIONS[key]
        license_key = self.settings.maxmind_license_key or ""
        url = self.settings.maxmind_url_template.format(edition=edition, key=license_key)
        with start_span("ipmeta.geoip.download", {"edition": edition, "url": redact(url, license_key)}):
            path = download_to_file(
                url,
                self.settings.scratch_dir,
                prefix=f"GeoLite2-{key}",
                suffix=".zip",
                reason=f"Cannot download maxmind {label}",
                timeout=self.settings.request_timeout,
                retries=self.settings.retries,
                secret=license_key,
                session=self.session,
            )
        self._created.append(path)
        return path

    def extract(self, key: str, archive: Path) -> Path:
        """Extract a downloaded edition and return its data directory."""
        with start_span("ipmeta.geoip.extract", {"archive": archive.name}):
            root, data_dir = extract_archive(archive, self.settings.scratch_dir, reason=EXTRACT_REASONS[key])
        self._created.append(root)
        return data_dir

    def acquire(self) -> Path:
        """Download, extract and merge all editions into one working directory."""
        archives = {key: self.download(key) for key in DOWNLOAD_ORDER}
        data_dirs = [self.extract(key, archives[key]) for key in EXTRACT_ORDER]
        merged = join_path_files(data_dirs, self.settings.scratch_dir)
        self._created.append(merged)
        return merged

    def build(self, *, progress: bool = False) -> List[NetworkRecord]:
        """Run the full acquisition and return the geo records.

        Raises:
            IndexBuildError: Any step failed; the reason names the step
        """
        try:
            working_dir = self.acquire()
            try:
                return process_geolite2_csv(
                    working_dir,
                    enable_city=self.settings.enable_city,
                    language=self.settings.maxmind_language,
                    progress=progress,
                )
            except IndexBuildError as e:
                logger.error(f"Cannot process database files in {working_dir}: {e}")
                raise IoFailure("Cannot process database files") from e
        finally:
            if not self.keep_files:
                self.cleanup()

    def cleanup(self) -> None:
        """Remove every file and directory this orchestrator created."""
        while self._created:
            path = self._created.pop()
            try:
                if path.is_dir():
                    shutil.rmtree(path)
                else:
                    path.unlink(missing_ok=True)
            except OSError as e:
                logger.debug(f"Could not remove {path}: {e}")


__all__ = [
    "GEOLITE2_EDITIONS",
    "descend_single_subdirectory",
    "extract_archive",
    "join_path_files",
    "GeoLite2Orchestrator",
]

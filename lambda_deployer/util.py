"""
Utility Functions - Common Operations.

This module provides the default artifact producer (zipping a function
source directory into a deployment package).
"""

import io
import os
import zipfile
from pathlib import Path
from typing import Callable, Optional, Union

from lambda_deployer.core.exceptions import PreconditionFailedError
from lambda_deployer.logger import logger

# Build leftovers that never belong in a deployment package
EXCLUDED_DIRS = {"__pycache__", ".pytest_cache", ".git"}
EXCLUDED_SUFFIXES = (".pyc", ".zip")


def build_artifact(source_dir: Union[str, Path], base_image: Optional[str] = None) -> bytes:
    """Compile a Lambda function directory into a deployable zip.

    The archive is built in memory with paths relative to source_dir, so
    the handler module sits at the archive root.

    Args:
        source_dir: Directory containing the function sources
        base_image: Build image tag from config.json, logged for traceability

    Returns:
        Bytes of the zipped Lambda package

    Raises:
        PreconditionFailedError: If the directory is missing or holds no files
    """
    source_dir = Path(source_dir)
    if not source_dir.is_dir():
        raise PreconditionFailedError(f"Function source directory not found: {source_dir}")

    if base_image:
        logger.info(f"Packaging {source_dir.name} (build image {base_image})")
    else:
        logger.info(f"Packaging {source_dir.name}")

    file_count = 0
    zip_buffer = io.BytesIO()
    with zipfile.ZipFile(zip_buffer, 'w', zipfile.ZIP_DEFLATED) as zf:
        for root, dirs, files in os.walk(source_dir):
            dirs[:] = sorted(d for d in dirs if d not in EXCLUDED_DIRS)
            for file in sorted(files):
                if file.endswith(EXCLUDED_SUFFIXES):
                    continue
                full_path = os.path.join(root, file)
                arcname = os.path.relpath(full_path, start=source_dir)
                zf.write(full_path, arcname)
                file_count += 1

    if file_count == 0:
        raise PreconditionFailedError(f"Zip file is empty: no files in {source_dir}")

    artifact = zip_buffer.getvalue()
    logger.debug(f"Built deployment package: {file_count} file(s), {len(artifact)} bytes")
    return artifact


def artifact_producer_for(source_dir: Union[str, Path], base_image: Optional[str] = None) -> Callable[[], bytes]:
    """Bind build_artifact to a directory, giving the zero-argument producer deploy() expects."""
    return lambda: build_artifact(source_dir, base_image)

from __future__ import annotations

import os
from pathlib import Path
from typing import Union
from urllib import error, request

from ouivendor.exceptions import RegistryError
from ouivendor.log import get_logger

logger = get_logger("fetch")

IEEE_OUI_CSV_URL = "https://standards-oui.ieee.org/oui/oui.csv"
USER_AGENT = "ouivendor/1.0"


def download_registry(
    url: str = IEEE_OUI_CSV_URL,
    dest: Union[str, Path] = "oui.csv",
    timeout: float = 30.0,
) -> Path:
    """
    Download the registry CSV to *dest*.

    The file is written next to *dest* first and renamed into place, so an
    interrupted download never leaves a truncated registry behind.
    """
    out = Path(dest)
    req = request.Request(url, headers={"User-Agent": USER_AGENT})
    logger.info("Downloading %s", url)
    try:
        with request.urlopen(req, timeout=timeout) as resp:
            data = resp.read()
    except (error.URLError, OSError) as exc:
        raise RegistryError(f"failed to download {url}: {exc}") from exc
    if not data:
        raise RegistryError(f"empty response from {url}")

    out.parent.mkdir(parents=True, exist_ok=True)
    tmp = out.with_name(out.name + ".part")
    tmp.write_bytes(data)
    os.replace(tmp, out)
    logger.info("Wrote %d bytes to %s", len(data), out)
    return out

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from ...constants import Defaults, Messages
from ...domain.exceptions import AcquisitionFailureError

if TYPE_CHECKING:
    from pathlib import Path


class AsyncFileReader:
    """Reads an uploaded file's text off the event loop thread."""

    def __init__(self, encoding: str = Defaults.ENCODING) -> None:
        super().__init__()
        self.encoding = encoding

    async def read_text(self, path: Path) -> str:
        try:
            return await asyncio.to_thread(path.read_text, encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise AcquisitionFailureError(Messages.READ_FAILED) from e

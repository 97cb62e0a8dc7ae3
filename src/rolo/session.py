"""Session loop: feeds an input stream to Rolo one line at a time."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from rolo.errors import QuitRequested

if TYPE_CHECKING:
    from rolo.core import Rolo

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BAD_INPUT = 2
EXIT_INTERRUPTED = 130


class Session:
    """Reads lines until end of stream or %Q."""

    def __init__(self, rolo: Rolo, stream: TextIO | None = None) -> None:
        self.rolo = rolo
        self._stream = stream if stream is not None else sys.stdin

    @property
    def name(self) -> str:
        return getattr(self._stream, "name", "stream")

    def run(self) -> int:
        """Process the stream and return the process exit code."""
        logger.debug("Session started on %s", self.name)

        try:
            while True:
                line = self._read_input()
                if line is None:
                    break
                self.rolo.handle_line(line)
        except QuitRequested:
            logger.debug("Quit requested")
            return EXIT_OK
        except UnicodeDecodeError as e:
            # stream position after a decode failure is undefined
            logger.debug("Undecodable input on %s", self.name)
            self.rolo.report(e)
            return EXIT_BAD_INPUT
        except KeyboardInterrupt:
            return EXIT_INTERRUPTED

        logger.debug("End of input on %s", self.name)
        return EXIT_OK

    def _read_input(self) -> str | None:
        raw = self._stream.readline()
        if not raw:
            return None
        return raw
